"""implreg — static trait-implementor tables and their publish step.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import implreg

    registry = implreg.load_table("core::ops::SubAssign")

    # Host not ready yet: the registry waits in the hand-off slot
    host = implreg.HostEnvironment()
    implreg.publish_to_host(registry, host)

    # Host becomes ready and picks it up
    host.install_hook(viewer.register_implementors)

    # Or publish straight into a sink of your choosing
    implreg.publish(registry, implreg.ImmediateSink(viewer.register_implementors))

    implreg.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from implreg.core.registry import ImplementorRegistry
from implreg.publish import (
    BufferedSink,
    HandoffSlot,
    HostEnvironment,
    ImmediateSink,
    PublicationOutcome,
    ReloadPolicy,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from implreg.publish.sinks import PublicationSink


def load_table(trait_path: str) -> ImplementorRegistry:
    """Build the registry of the table registered for ``trait_path``.

    Raises
    ------
    implreg.plugins.PluginNotFoundError
        If no table is registered under ``trait_path``.
    """
    from implreg.tables import load_table as _load_table

    return _load_table(trait_path)


def available_tables() -> list[str]:
    """Return the trait paths of all registered tables."""
    from implreg.tables import available_tables as _available_tables

    return _available_tables()


def publish(registry: ImplementorRegistry, sink: "PublicationSink") -> PublicationOutcome:
    """Hand ``registry`` to ``sink`` exactly once.

    Parameters
    ----------
    registry:
        The registry to publish, passed by reference.
    sink:
        An ``ImmediateSink`` (host hook) or ``BufferedSink`` (hand-off
        slot).

    Returns
    -------
    PublicationOutcome
        ``DELIVERED`` or ``BUFFERED``.
    """
    from implreg.publish.publisher import publish as _publish

    return _publish(registry, sink)


def publish_to_host(registry: ImplementorRegistry, host: HostEnvironment) -> PublicationOutcome:
    """Publish through the sink ``host`` selects for its current state."""
    from implreg.publish.publisher import publish_to_host as _publish_to_host

    return _publish_to_host(registry, host)


__all__ = [
    "__version__",
    "BufferedSink",
    "HandoffSlot",
    "HostEnvironment",
    "ImmediateSink",
    "ImplementorRegistry",
    "PublicationOutcome",
    "ReloadPolicy",
    "available_tables",
    "load_table",
    "publish",
    "publish_to_host",
]
