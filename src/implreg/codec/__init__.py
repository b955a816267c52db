"""Reading and writing implementor registries.

``serializer`` covers JSON and YAML documents; ``script`` covers the
rustdoc loader-script format.
"""
from __future__ import annotations

from implreg.codec.script import (
    ScriptFormatError,
    parse_script,
    render_script,
    trait_path_from_filename,
)
from implreg.codec.serializer import RegistryDocumentError, RegistrySerializer

__all__ = [
    "RegistryDocumentError",
    "RegistrySerializer",
    "ScriptFormatError",
    "parse_script",
    "render_script",
    "trait_path_from_filename",
]
