"""Plugin subsystem for implreg.

Implementor tables from other distributions register through
``importlib.metadata`` entry-points in the "implreg.tables" group.

Example
-------
.. code-block:: toml

    [project.entry-points."implreg.tables"]
    "mycrate::Trait" = "mycrate_docs.tables:TraitImplementors"
"""
from __future__ import annotations

from implreg.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginAlreadyRegisteredError", "PluginNotFoundError", "PluginRegistry"]
