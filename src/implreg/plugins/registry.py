"""Typed plugin registry used to catalogue implementor tables.

Built-in tables register with the ``@register`` decorator when their
module is imported.  Tables shipped by other distributions are found
through ``importlib.metadata`` entry-points in the ``implreg.tables``
group.

Example
-------
::

    from implreg.plugins.registry import PluginRegistry
    from implreg.tables.base import ImplementorTable

    tables: PluginRegistry[ImplementorTable] = PluginRegistry(ImplementorTable, "tables")

    @tables.register("core::ops::AddAssign")
    class AddAssignImplementors(ImplementorTable):
        ...

    tables.load_entrypoints("implreg.tables")
    table_cls = tables.get("core::ops::AddAssign")

A downstream ``pyproject.toml`` declares its tables as::

    [project.entry-points."implreg.tables"]
    "mycrate::Trait" = "mycrate_docs.tables:TraitImplementors"
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(KeyError):
    """Raised when no class is registered under the requested name."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Nothing is registered as {name!r} in the {registry_name!r} registry. "
            "Check that the providing package is installed and declares an "
            "'implreg.tables' entry-point."
        )


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a name is registered twice."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"{name!r} is already registered in the {registry_name!r} registry; "
            "deregister the existing entry first."
        )


class PluginRegistry(Generic[T]):
    """Name-to-class registry restricted to subclasses of ``base_class``.

    Parameters
    ----------
    base_class:
        Abstract base every registered class must subclass.
    name:
        Registry name used in log records and error messages.
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``.

        The class is returned unchanged.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is taken.
        TypeError
            If the class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} as {name!r}: "
                f"it is not a subclass of {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %s as %r in registry %r", cls.__qualname__, name, self._name)

    def deregister(self, name: str) -> None:
        """Remove ``name``; raises ``PluginNotFoundError`` if absent."""
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name)
        del self._plugins[name]
        logger.debug("Deregistered %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name) from None

    def list_plugins(self) -> list[str]:
        """Return registered names in alphabetical order."""
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"PluginRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"plugins={self.list_plugins()})"
        )

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> int:
        """Import and register every entry-point declared in ``group``.

        Names that are already registered are skipped, so repeated calls
        are harmless.  An entry-point that fails to import, or that does
        not point at a ``base_class`` subclass, is logged and skipped.

        Returns
        -------
        int
            The number of classes newly registered by this call.
        """
        added = 0
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except (PluginAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            added += 1
        return added
