"""The publish step."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from implreg.core.registry import ImplementorRegistry
from implreg.publish.sinks import PublicationOutcome, PublicationSink

if TYPE_CHECKING:
    from implreg.publish.host import HostEnvironment

logger = logging.getLogger(__name__)


def publish(registry: ImplementorRegistry, sink: PublicationSink) -> PublicationOutcome:
    """Hand ``registry`` to ``sink`` exactly once.

    Parameters
    ----------
    registry:
        The registry to publish.  It is passed by reference; sinks never
        copy it.
    sink:
        Where the registry goes.  Errors raised by the sink (in practice,
        by a host hook) propagate to the caller.

    Returns
    -------
    PublicationOutcome
        ``DELIVERED`` if a hook received the registry, ``BUFFERED`` if it
        was stored for later pickup.
    """
    outcome = sink.accept(registry)
    logger.debug(
        "Published %s (%d libraries) via %r: %s",
        registry.trait_path or "<unnamed trait>",
        len(registry),
        sink,
        outcome.name,
    )
    return outcome


def publish_to_host(registry: ImplementorRegistry, host: "HostEnvironment") -> PublicationOutcome:
    """Publish through whichever sink ``host`` selects for its current state."""
    return publish(registry, host.sink())
