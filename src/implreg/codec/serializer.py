"""JSON and YAML serialization for implementor registries.

The serialized document is a plain dict::

    {
        "trait": "core::ops::SubAssign",
        "implementors": {
            "libc": [],
            "wayland_client": ["impl <a ...>SubAssign</a> for ...", ...],
        },
    }

Library order and fragment order are kept exactly as in the registry.

Usage
-----
::

    from implreg.codec.serializer import RegistrySerializer

    serializer = RegistrySerializer()
    text = serializer.to_yaml(registry)
    assert serializer.from_yaml(text) == registry
"""
from __future__ import annotations

import json

import yaml

from implreg.core.registry import ImplementorRegistry


class RegistryDocumentError(ValueError):
    """Raised when a serialized document does not have the expected shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Not an implementor registry document: {reason}")


class RegistrySerializer:
    """Converts between ``ImplementorRegistry`` and dict, JSON and YAML."""

    def to_dict(self, registry: ImplementorRegistry) -> dict[str, object]:
        return {
            "trait": registry.trait_path,
            "implementors": registry.to_dict(),
        }

    def from_dict(self, data: object) -> ImplementorRegistry:
        """Build a registry from a document produced by :meth:`to_dict`.

        Raises
        ------
        RegistryDocumentError
            If the top-level shape is wrong.
        implreg.core.registry.MalformedRegistryError
            If an implementor entry is invalid.
        """
        if not isinstance(data, dict):
            raise RegistryDocumentError(f"expected a mapping, got {type(data).__name__}")
        implementors = data.get("implementors")
        if not isinstance(implementors, dict):
            raise RegistryDocumentError("missing or non-mapping 'implementors' key")
        trait = data.get("trait")
        if trait is not None and not isinstance(trait, str):
            raise RegistryDocumentError("'trait' must be a string or null")
        return ImplementorRegistry(implementors, trait_path=trait)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, registry: ImplementorRegistry, indent: int = 2) -> str:
        return json.dumps(self.to_dict(registry), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> ImplementorRegistry:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RegistryDocumentError(f"invalid JSON ({exc})") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, registry: ImplementorRegistry) -> str:
        return yaml.safe_dump(
            self.to_dict(registry),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=100_000,
        )

    def from_yaml(self, text: str) -> ImplementorRegistry:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RegistryDocumentError(f"invalid YAML ({exc})") from exc
        return self.from_dict(data)
