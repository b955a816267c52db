"""Unit tests for implreg.tables — the table catalogue and SubAssign data."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from unittest.mock import patch

import pytest

import implreg.tables as tables
from implreg.codec import parse_script, render_script
from implreg.plugins import PluginNotFoundError
from implreg.tables import ImplementorTable, available_tables, load_table, table_registry
from implreg.tables.sub_assign import IMPLEMENTORS, TRAIT_PATH, SubAssignImplementors

SUB_ASSIGN_LIBRARIES = [
    "libloading",
    "libc",
    "dlib",
    "wayland_sys",
    "shared_library",
    "wayland_client",
    "tempfile",
    "wayland_window",
    "wayland_kbd",
    "winit",
]


class TestSubAssignTable:
    def test_registered_under_trait_path(self) -> None:
        assert table_registry.get("core::ops::SubAssign") is SubAssignImplementors

    def test_trait_path(self) -> None:
        assert load_table(TRAIT_PATH).trait_path == "core::ops::SubAssign"

    def test_library_order(self) -> None:
        assert load_table(TRAIT_PATH).libraries() == SUB_ASSIGN_LIBRARIES

    def test_populated_libraries(self) -> None:
        assert load_table(TRAIT_PATH).populated_libraries() == ["wayland_client", "wayland_window"]

    def test_fragment_counts(self) -> None:
        registry = load_table(TRAIT_PATH)
        assert len(registry["wayland_client"]) == 8
        assert len(registry["wayland_window"]) == 4
        assert registry.fragment_count == 12

    def test_repeated_fragments_are_kept_in_place(self) -> None:
        client = load_table(TRAIT_PATH)["wayland_client"]
        assert client[0] == client[6]
        assert client[3] == client[4]

    def test_fragments_are_verbatim_markup(self) -> None:
        first = load_table(TRAIT_PATH)["wayland_window"][0]
        assert first.startswith("impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html'")
        assert "&lt;" in first
        assert first.endswith(">WlShellSurfaceResize</a>")

    def test_every_fragment_names_the_trait(self) -> None:
        registry = load_table(TRAIT_PATH)
        for library in registry.populated_libraries():
            for fragment in registry[library]:
                assert "title='core::ops::SubAssign'" in fragment

    def test_matches_generated_rustdoc_script(self, sub_assign_script_path: Path) -> None:
        script = sub_assign_script_path.read_text(encoding="utf-8")
        assert parse_script(script, trait_path=TRAIT_PATH) == load_table(TRAIT_PATH)

    def test_renders_generated_rustdoc_script(self, sub_assign_script_path: Path) -> None:
        script = sub_assign_script_path.read_text(encoding="utf-8")
        assert render_script(load_table(TRAIT_PATH)) == script


class TestDeterminism:
    def test_two_builds_are_equal(self) -> None:
        assert load_table(TRAIT_PATH) == load_table(TRAIT_PATH)

    def test_two_builds_are_distinct_objects(self) -> None:
        assert load_table(TRAIT_PATH) is not load_table(TRAIT_PATH)

    def test_literal_rejects_new_libraries(self) -> None:
        with pytest.raises(TypeError):
            IMPLEMENTORS["serde"] = ()  # type: ignore[index]

    def test_literal_lists_cannot_grow(self) -> None:
        with pytest.raises(AttributeError):
            IMPLEMENTORS["winit"].append("injected")  # type: ignore[attr-defined]
        assert load_table(TRAIT_PATH)["winit"] == ()

    def test_build_matches_literal_contents(self) -> None:
        registry = SubAssignImplementors().build()
        assert registry == dict(IMPLEMENTORS)


class TestCatalogue:
    def test_available_tables_includes_builtin(self) -> None:
        assert "core::ops::SubAssign" in available_tables()

    def test_unknown_trait_raises(self) -> None:
        with pytest.raises(PluginNotFoundError):
            load_table("core::ops::Nope")

    def test_custom_table_can_be_registered(self) -> None:
        class AddAssignImplementors(ImplementorTable):
            trait_path = "core::ops::AddAssign"

            def implementors(self) -> Mapping[str, Sequence[str]]:
                return {"mycrate": ["impl AddAssign for Thing"]}

        table_registry.register_class(AddAssignImplementors.trait_path, AddAssignImplementors)
        try:
            registry = load_table("core::ops::AddAssign")
            assert registry["mycrate"] == ("impl AddAssign for Thing",)
            assert registry.trait_path == "core::ops::AddAssign"
        finally:
            table_registry.deregister("core::ops::AddAssign")

    def test_entrypoints_are_loaded_once(self) -> None:
        with patch.object(tables, "_entrypoints_loaded", False), patch.object(
            table_registry, "load_entrypoints", return_value=0
        ) as load:
            available_tables()
            available_tables()
        load.assert_called_once_with("implreg.tables")
