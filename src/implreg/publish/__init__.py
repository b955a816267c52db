"""Publishing implementor registries to a documentation host."""
from __future__ import annotations

from implreg.publish.host import HostEnvironment
from implreg.publish.publisher import publish, publish_to_host
from implreg.publish.sinks import (
    BufferedSink,
    HandoffSlot,
    HandoffSlotEmptyError,
    ImmediateSink,
    PublicationOutcome,
    PublicationSink,
    RegistrationHook,
    ReloadPolicy,
)

__all__ = [
    "BufferedSink",
    "HandoffSlot",
    "HandoffSlotEmptyError",
    "HostEnvironment",
    "ImmediateSink",
    "PublicationOutcome",
    "PublicationSink",
    "RegistrationHook",
    "ReloadPolicy",
    "publish",
    "publish_to_host",
]
