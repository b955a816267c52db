"""Base class and catalogue for static implementor tables.

A table is a class holding one literal mapping of library identifier
to implementor fragments for a single trait.  Tables are catalogued in
:data:`table_registry` under their trait path.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import ClassVar

from implreg.core.registry import ImplementorRegistry
from implreg.plugins.registry import PluginRegistry

ENTRYPOINT_GROUP = "implreg.tables"


class ImplementorTable(ABC):
    """A static table of implementors for one trait.

    Subclasses set :attr:`trait_path` and return their literal from
    :meth:`implementors`.  The literal must not depend on runtime state:
    building the same table twice always yields equal registries.
    """

    trait_path: ClassVar[str]

    @abstractmethod
    def implementors(self) -> Mapping[str, Sequence[str]]:
        """Return the authored library-to-fragments literal."""

    def build(self) -> ImplementorRegistry:
        """Construct the immutable registry for this table."""
        return ImplementorRegistry(self.implementors(), trait_path=self.trait_path)


table_registry: PluginRegistry[ImplementorTable] = PluginRegistry(ImplementorTable, "tables")
