"""Host environment: the composition root that picks a publication sink.

A :class:`HostEnvironment` stands in for the documentation viewer.  It
owns the optional ``register_implementors`` hook and the
``pending_implementors`` hand-off slot.  When the hook is set, tables
published into the host are delivered immediately; otherwise they wait
in the slot until :meth:`HostEnvironment.install_hook` is called.

Usage
-----
::

    host = HostEnvironment()
    publish_to_host(load_table("core::ops::SubAssign"), host)   # buffered
    host.install_hook(viewer.register_implementors)             # drained
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from implreg.core.registry import ImplementorRegistry
from implreg.publish.sinks import (
    BufferedSink,
    HandoffSlot,
    ImmediateSink,
    PublicationSink,
    RegistrationHook,
    ReloadPolicy,
)

logger = logging.getLogger(__name__)


@dataclass
class HostEnvironment:
    """Hook and hand-off slot exposed by a documentation host.

    Parameters
    ----------
    register_implementors:
        Hook called with each published registry once the host is ready.
        ``None`` means the host is not ready yet.
    pending_implementors:
        Slot used while the hook is absent.
    reload_policy:
        How repeated buffered publications combine in the slot.
    """

    register_implementors: RegistrationHook | None = None
    pending_implementors: HandoffSlot = field(default_factory=HandoffSlot)
    reload_policy: ReloadPolicy = ReloadPolicy.LAST_WRITE_WINS

    @property
    def ready(self) -> bool:
        return self.register_implementors is not None

    def sink(self) -> PublicationSink:
        """Return the sink matching the host's current state."""
        if self.register_implementors is not None:
            return ImmediateSink(self.register_implementors)
        return BufferedSink(self.pending_implementors, self.reload_policy)

    def install_hook(self, hook: RegistrationHook) -> ImplementorRegistry | None:
        """Make the host ready and pick up anything left in the slot.

        Returns
        -------
        ImplementorRegistry | None
            The registry drained from the slot and passed to ``hook``, or
            ``None`` if the slot was empty.

        If ``hook`` raises, the registry stays in the slot and the error
        propagates, so the pickup can be retried.
        """
        self.register_implementors = hook
        registry = self.pending_implementors.peek()
        if registry is None:
            return None
        logger.debug("Draining %r into newly installed hook", self.pending_implementors.name)
        hook(registry)
        return self.pending_implementors.take()
