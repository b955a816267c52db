"""Unit tests for implreg.core.registry — ImplementorRegistry and its errors."""
from __future__ import annotations

import pytest

from implreg.core.registry import (
    DuplicateLibraryError,
    ImplementorRegistry,
    MalformedRegistryError,
)


# ===========================================================================
# Construction
# ===========================================================================


class TestConstruction:
    def test_from_mapping_keeps_fragment_order(self, lib_a_fragments: list[str]) -> None:
        registry = ImplementorRegistry({"libA": lib_a_fragments})
        assert list(registry["libA"]) == lib_a_fragments

    def test_duplicate_fragments_are_preserved(self, lib_a_fragments: list[str]) -> None:
        registry = ImplementorRegistry({"libA": lib_a_fragments})
        assert registry["libA"][0] == registry["libA"][2]
        assert len(registry["libA"]) == 3

    def test_from_pairs(self) -> None:
        registry = ImplementorRegistry([("x", ["a"]), ("y", [])])
        assert registry.libraries() == ["x", "y"]

    def test_empty_list_is_allowed(self) -> None:
        registry = ImplementorRegistry({"libB": []})
        assert registry["libB"] == ()

    def test_empty_registry(self) -> None:
        registry = ImplementorRegistry()
        assert len(registry) == 0
        assert registry.fragment_count == 0

    def test_trait_path_defaults_to_none(self) -> None:
        assert ImplementorRegistry().trait_path is None

    def test_source_is_copied(self) -> None:
        source = {"libA": ["one"]}
        registry = ImplementorRegistry(source)
        source["libA"].append("two")
        source["libZ"] = []
        assert registry["libA"] == ("one",)
        assert "libZ" not in registry

    def test_duplicate_pair_raises(self) -> None:
        with pytest.raises(DuplicateLibraryError) as exc_info:
            ImplementorRegistry([("x", []), ("x", ["a"])])
        assert exc_info.value.library == "x"

    def test_duplicate_error_is_malformed_and_value_error(self) -> None:
        with pytest.raises(MalformedRegistryError):
            ImplementorRegistry([("x", []), ("x", [])])
        with pytest.raises(ValueError):
            ImplementorRegistry([("x", []), ("x", [])])

    @pytest.mark.parametrize("key", ["", 3, None])
    def test_bad_key_raises(self, key: object) -> None:
        with pytest.raises(MalformedRegistryError):
            ImplementorRegistry({key: []})  # type: ignore[dict-item]

    def test_string_value_raises(self) -> None:
        with pytest.raises(MalformedRegistryError, match="expected a list"):
            ImplementorRegistry({"libA": "impl Foo"})  # type: ignore[dict-item]

    def test_none_value_raises(self) -> None:
        with pytest.raises(MalformedRegistryError):
            ImplementorRegistry({"libA": None})  # type: ignore[dict-item]

    def test_non_string_fragment_raises(self) -> None:
        with pytest.raises(MalformedRegistryError, match="fragment #1"):
            ImplementorRegistry({"libA": ["ok", 42]})  # type: ignore[list-item]

    @pytest.mark.parametrize("item", [("only-one",), ("a", [], "extra"), 42])
    def test_non_pair_item_raises(self, item: object) -> None:
        with pytest.raises(MalformedRegistryError, match="pair"):
            ImplementorRegistry([item])  # type: ignore[list-item]


# ===========================================================================
# Read-only mapping behaviour
# ===========================================================================


class TestMappingBehaviour:
    def test_len_counts_libraries(self, sample_registry: ImplementorRegistry) -> None:
        assert len(sample_registry) == 3

    def test_iteration_follows_authored_order(self, sample_registry: ImplementorRegistry) -> None:
        assert list(sample_registry) == ["libA", "libB", "libC"]

    def test_contains(self, sample_registry: ImplementorRegistry) -> None:
        assert "libA" in sample_registry
        assert "libZ" not in sample_registry

    def test_missing_key_raises_key_error(self, sample_registry: ImplementorRegistry) -> None:
        with pytest.raises(KeyError):
            sample_registry["libZ"]

    def test_values_are_tuples(self, sample_registry: ImplementorRegistry) -> None:
        assert isinstance(sample_registry["libA"], tuple)

    def test_no_item_assignment(self, sample_registry: ImplementorRegistry) -> None:
        with pytest.raises(TypeError):
            sample_registry["libD"] = ()  # type: ignore[index]

    def test_no_item_deletion(self, sample_registry: ImplementorRegistry) -> None:
        with pytest.raises(TypeError):
            del sample_registry["libA"]  # type: ignore[attr-defined]

    def test_unhashable(self, sample_registry: ImplementorRegistry) -> None:
        with pytest.raises(TypeError):
            hash(sample_registry)


# ===========================================================================
# Equality
# ===========================================================================


class TestEquality:
    def test_equal_when_built_from_same_literal(self, lib_a_fragments: list[str]) -> None:
        first = ImplementorRegistry({"libA": lib_a_fragments, "libB": []}, trait_path="t")
        second = ImplementorRegistry({"libA": lib_a_fragments, "libB": []}, trait_path="t")
        assert first == second

    def test_key_order_is_irrelevant(self) -> None:
        assert ImplementorRegistry({"a": [], "b": ["x"]}) == ImplementorRegistry({"b": ["x"], "a": []})

    def test_fragment_order_is_significant(self) -> None:
        assert ImplementorRegistry({"a": ["x", "y"]}) != ImplementorRegistry({"a": ["y", "x"]})

    def test_trait_path_is_not_part_of_equality(self) -> None:
        assert ImplementorRegistry({"a": ["x"]}, trait_path="t") == ImplementorRegistry({"a": ["x"]})
        assert ImplementorRegistry({"a": []}, trait_path="t1") == ImplementorRegistry({"a": []}, trait_path="t2")

    def test_different_entries_differ_despite_same_trait(self) -> None:
        assert ImplementorRegistry({"a": ["x"]}, trait_path="t") != ImplementorRegistry({"a": []}, trait_path="t")

    def test_compares_with_plain_mapping_of_tuples(self) -> None:
        assert ImplementorRegistry({"a": ["x"]}) == {"a": ("x",)}

    def test_not_equal_to_non_mapping(self) -> None:
        assert ImplementorRegistry() != []


# ===========================================================================
# Accessors
# ===========================================================================


class TestAccessors:
    def test_fragment_count(self, sample_registry: ImplementorRegistry) -> None:
        assert sample_registry.fragment_count == 3

    def test_populated_libraries(self, sample_registry: ImplementorRegistry) -> None:
        assert sample_registry.populated_libraries() == ["libA"]

    def test_to_dict_returns_lists(self, sample_registry: ImplementorRegistry, lib_a_fragments: list[str]) -> None:
        data = sample_registry.to_dict()
        assert data == {"libA": lib_a_fragments, "libB": [], "libC": []}
        assert list(data) == ["libA", "libB", "libC"]

    def test_to_dict_is_a_fresh_copy(self, sample_registry: ImplementorRegistry) -> None:
        data = sample_registry.to_dict()
        data["libA"].clear()
        data["libD"] = []
        assert sample_registry.fragment_count == 3
        assert "libD" not in sample_registry

    def test_repr_mentions_trait_and_counts(self, sample_registry: ImplementorRegistry) -> None:
        text = repr(sample_registry)
        assert "crate::Trait" in text
        assert "libraries=3" in text
        assert "fragments=3" in text


# ===========================================================================
# merged
# ===========================================================================


class TestMerged:
    def test_newer_list_wins_for_shared_library(self) -> None:
        old = ImplementorRegistry({"a": ["old"], "b": ["keep"]})
        new = ImplementorRegistry({"a": ["new"]})
        merged = old.merged(new)
        assert merged["a"] == ("new",)
        assert merged["b"] == ("keep",)

    def test_union_of_libraries(self) -> None:
        merged = ImplementorRegistry({"a": []}).merged(ImplementorRegistry({"b": []}))
        assert set(merged) == {"a", "b"}

    def test_inputs_are_untouched(self) -> None:
        old = ImplementorRegistry({"a": ["old"]})
        new = ImplementorRegistry({"a": ["new"], "c": []})
        old.merged(new)
        assert old == ImplementorRegistry({"a": ["old"]})
        assert new == ImplementorRegistry({"a": ["new"], "c": []})

    def test_trait_path_falls_back_to_existing(self) -> None:
        old = ImplementorRegistry({}, trait_path="t")
        assert old.merged(ImplementorRegistry()).trait_path == "t"
        assert old.merged(ImplementorRegistry(trait_path="u")).trait_path == "u"
