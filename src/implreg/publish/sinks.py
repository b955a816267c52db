"""Publication sinks: where a registry goes when it is published.

Two sinks cover the two states a host can be in at load time:

``ImmediateSink``
    The host is ready and exposes a ``register_implementors`` hook.
    The hook is called synchronously with the registry.
``BufferedSink``
    The host is not ready yet.  The registry is parked in a
    :class:`HandoffSlot` (the ``pending_implementors`` slot) until the
    host picks it up.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto

from implreg.core.registry import ImplementorRegistry

logger = logging.getLogger(__name__)

RegistrationHook = Callable[[ImplementorRegistry], object]


class PublicationOutcome(Enum):
    """Which path a publication took."""

    DELIVERED = auto()
    BUFFERED = auto()


class ReloadPolicy(Enum):
    """What a buffered write does when the slot is already occupied.

    LAST_WRITE_WINS
        The new registry replaces whatever the slot held.
    MERGE_BY_KEY
        The slot ends up holding ``existing.merged(new)``: libraries
        only in the old registry survive, shared libraries take the new
        list.
    """

    LAST_WRITE_WINS = "last-write-wins"
    MERGE_BY_KEY = "merge-by-key"


class HandoffSlotEmptyError(LookupError):
    """Raised when taking from a slot that holds nothing."""

    def __init__(self, slot_name: str) -> None:
        self.slot_name = slot_name
        super().__init__(f"Hand-off slot {slot_name!r} is empty; nothing has been published to it yet.")


class HandoffSlot:
    """Holds at most one registry awaiting pickup by the host."""

    def __init__(self, name: str = "pending_implementors") -> None:
        self.name = name
        self._value: ImplementorRegistry | None = None

    @property
    def is_empty(self) -> bool:
        return self._value is None

    def put(
        self,
        registry: ImplementorRegistry,
        policy: ReloadPolicy = ReloadPolicy.LAST_WRITE_WINS,
    ) -> None:
        """Store ``registry``, resolving an occupied slot with ``policy``."""
        if self._value is None or policy is ReloadPolicy.LAST_WRITE_WINS:
            if self._value is not None:
                logger.debug("Slot %r overwritten (%s)", self.name, policy.value)
            self._value = registry
            return
        logger.debug("Slot %r merged by key", self.name)
        self._value = self._value.merged(registry)

    def peek(self) -> ImplementorRegistry | None:
        """Return the stored registry without removing it."""
        return self._value

    def take(self) -> ImplementorRegistry:
        """Remove and return the stored registry.

        Raises
        ------
        HandoffSlotEmptyError
            If nothing is stored.
        """
        if self._value is None:
            raise HandoffSlotEmptyError(self.name)
        value, self._value = self._value, None
        return value

    def __repr__(self) -> str:
        return f"HandoffSlot(name={self.name!r}, value={self._value!r})"


class PublicationSink(ABC):
    """Destination for a published registry."""

    @abstractmethod
    def accept(self, registry: ImplementorRegistry) -> PublicationOutcome:
        """Hand ``registry`` over and report which path was taken."""


class ImmediateSink(PublicationSink):
    """Calls a host hook synchronously with the registry.

    The hook receives the registry object itself.  Whatever the hook
    raises is not caught here.
    """

    def __init__(self, hook: RegistrationHook) -> None:
        self.hook = hook

    def accept(self, registry: ImplementorRegistry) -> PublicationOutcome:
        self.hook(registry)
        return PublicationOutcome.DELIVERED

    def __repr__(self) -> str:
        return f"ImmediateSink(hook={self.hook!r})"


class BufferedSink(PublicationSink):
    """Parks the registry in a hand-off slot for later pickup."""

    def __init__(
        self,
        slot: HandoffSlot,
        policy: ReloadPolicy = ReloadPolicy.LAST_WRITE_WINS,
    ) -> None:
        self.slot = slot
        self.policy = policy

    def accept(self, registry: ImplementorRegistry) -> PublicationOutcome:
        self.slot.put(registry, self.policy)
        return PublicationOutcome.BUFFERED

    def __repr__(self) -> str:
        return f"BufferedSink(slot={self.slot.name!r}, policy={self.policy.value!r})"
