"""Static implementor tables.

Importing this package registers the built-in tables.  Tables from
other distributions are picked up from the "implreg.tables"
entry-point group the first time :func:`available_tables` or
:func:`load_table` runs.

Usage
-----
::

    from implreg.tables import available_tables, load_table

    available_tables()                       # ['core::ops::SubAssign', ...]
    registry = load_table("core::ops::SubAssign")
"""
from __future__ import annotations

import logging

from implreg.core.registry import ImplementorRegistry
from implreg.tables import sub_assign  # noqa: F401  (registers the built-in table)
from implreg.tables.base import ENTRYPOINT_GROUP, ImplementorTable, table_registry

logger = logging.getLogger(__name__)

_entrypoints_loaded = False


def _ensure_entrypoints() -> None:
    global _entrypoints_loaded
    if _entrypoints_loaded:
        return
    added = table_registry.load_entrypoints(ENTRYPOINT_GROUP)
    _entrypoints_loaded = True
    logger.debug("Loaded %d table(s) from entry-point group %r", added, ENTRYPOINT_GROUP)


def available_tables() -> list[str]:
    """Return the trait paths of every registered table, sorted."""
    _ensure_entrypoints()
    return table_registry.list_plugins()


def load_table(trait_path: str) -> ImplementorRegistry:
    """Build the registry for ``trait_path``.

    Raises
    ------
    implreg.plugins.PluginNotFoundError
        If no table is registered for ``trait_path``.
    """
    _ensure_entrypoints()
    table_cls = table_registry.get(trait_path)
    return table_cls().build()


__all__ = [
    "ENTRYPOINT_GROUP",
    "ImplementorTable",
    "available_tables",
    "load_table",
    "table_registry",
]
