"""Core domain types.

Submodules in core/ should not import from publish/, tables/, codec/
or cli/.
"""
from __future__ import annotations

from implreg.core.registry import (
    DuplicateLibraryError,
    ImplementorRegistry,
    MalformedRegistryError,
)

__all__ = [
    "DuplicateLibraryError",
    "ImplementorRegistry",
    "MalformedRegistryError",
]
