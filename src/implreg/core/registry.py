"""Immutable registry of trait implementors.

An :class:`ImplementorRegistry` maps a library identifier (the crate
name, e.g. ``"wayland_client"``) to the ordered list of pre-rendered
markup fragments that describe each implementation of one trait.

Fragments are opaque: the registry never parses, escapes, or
sanitizes them.  Whoever renders them is responsible for treating them
as trusted or not.

Usage
-----
::

    from implreg.core.registry import ImplementorRegistry

    registry = ImplementorRegistry(
        {"libA": ["impl <a>Trait</a> for <a>Foo</a>"], "libB": []},
        trait_path="crate::Trait",
    )
    registry["libA"]          # ('impl <a>Trait</a> for <a>Foo</a>',)
    registry.to_dict()        # {'libA': [...], 'libB': []}
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Union

RegistrySource = Union[Mapping[str, Sequence[str]], Iterable[tuple[str, Sequence[str]]]]


class MalformedRegistryError(ValueError):
    """Raised when registry data violates the key/list invariant."""

    def __init__(self, library: object, reason: str) -> None:
        self.library = library
        self.reason = reason
        super().__init__(f"Invalid implementor entry for library {library!r}: {reason}")


class DuplicateLibraryError(MalformedRegistryError):
    """Raised when the same library identifier appears twice."""

    def __init__(self, library: str) -> None:
        super().__init__(
            library,
            "library identifiers must be unique; merge the two lists before "
            "building the registry",
        )


def _pairs(source: RegistrySource) -> Iterable[tuple[str, Sequence[str]]]:
    if isinstance(source, Mapping):
        return source.items()
    return source


def _check_fragments(library: str, fragments: object) -> tuple[str, ...]:
    if isinstance(fragments, (str, bytes)) or not isinstance(fragments, (list, tuple)):
        raise MalformedRegistryError(
            library, f"expected a list of fragments, got {type(fragments).__name__}"
        )
    for index, fragment in enumerate(fragments):
        if not isinstance(fragment, str):
            raise MalformedRegistryError(
                library,
                f"fragment #{index} is {type(fragment).__name__}, not str",
            )
    return tuple(fragments)


class ImplementorRegistry(Mapping[str, tuple[str, ...]]):
    """Read-only mapping from library identifier to implementor fragments.

    Parameters
    ----------
    source:
        A mapping, or an iterable of ``(library, fragments)`` pairs.
        Pairs are checked for duplicate identifiers; a mapping cannot
        contain any.
    trait_path:
        Fully qualified path of the trait the fragments implement,
        e.g. ``"core::ops::SubAssign"``.  Optional, and not part of
        equality: two registries are equal when their entries are.

    Raises
    ------
    MalformedRegistryError
        If an item of ``source`` is not a pair, a key is not a non-empty
        string, a value is not a list or tuple, or a fragment is not a
        string.
    DuplicateLibraryError
        If ``source`` yields the same library identifier twice.
    """

    __slots__ = ("_entries", "_trait_path")

    def __init__(self, source: RegistrySource = (), trait_path: str | None = None) -> None:
        entries: dict[str, tuple[str, ...]] = {}
        for item in _pairs(source):
            try:
                library, fragments = item
            except (TypeError, ValueError):
                raise MalformedRegistryError(item, "expected a (library, fragments) pair") from None
            if not isinstance(library, str) or not library:
                raise MalformedRegistryError(library, "library identifier must be a non-empty string")
            if library in entries:
                raise DuplicateLibraryError(library)
            entries[library] = _check_fragments(library, fragments)
        self._entries = entries
        self._trait_path = trait_path

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, library: str) -> tuple[str, ...]:
        return self._entries[library]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImplementorRegistry):
            return self._entries == other._entries
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ImplementorRegistry(trait_path={self._trait_path!r}, "
            f"libraries={len(self)}, fragments={self.fragment_count})"
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def trait_path(self) -> str | None:
        """The trait these implementors belong to, if known."""
        return self._trait_path

    @property
    def fragment_count(self) -> int:
        """Total number of fragments across all libraries."""
        return sum(len(fragments) for fragments in self._entries.values())

    def libraries(self) -> list[str]:
        """Return library identifiers in authored order."""
        return list(self._entries)

    def populated_libraries(self) -> list[str]:
        """Return only the libraries with at least one fragment."""
        return [library for library, fragments in self._entries.items() if fragments]

    def to_dict(self) -> dict[str, list[str]]:
        """Return a fresh, mutable ``dict`` copy with list values."""
        return {library: list(fragments) for library, fragments in self._entries.items()}

    def merged(self, newer: ImplementorRegistry) -> ImplementorRegistry:
        """Combine two registries by key.

        Libraries only in ``self`` are kept; for libraries present in
        ``newer`` its list replaces the existing one.  The trait path
        of ``newer`` wins when it is set.
        """
        entries: dict[str, tuple[str, ...]] = dict(self._entries)
        entries.update(newer._entries)
        return ImplementorRegistry(entries, trait_path=newer.trait_path or self._trait_path)
