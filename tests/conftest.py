"""Shared test fixtures for implreg.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Keep domain-specific fixtures close to the
tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from implreg.core.registry import ImplementorRegistry

FIXTURES = Path(__file__).parent / "fixtures"

LIB_A_FRAGMENTS = [
    "impl <a class='trait' href='t.html'>Trait</a> for <a class='struct' href='a/struct.Foo.html'>Foo</a>",
    "impl <a class='trait' href='t.html'>Trait</a> for <a class='struct' href='a/struct.Bar.html'>Bar</a>",
    "impl <a class='trait' href='t.html'>Trait</a> for <a class='struct' href='a/struct.Foo.html'>Foo</a>",
]


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "implreg"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def lib_a_fragments() -> list[str]:
    return list(LIB_A_FRAGMENTS)


@pytest.fixture()
def sample_registry() -> ImplementorRegistry:
    """A small registry with one populated and two empty libraries."""
    return ImplementorRegistry(
        {"libA": LIB_A_FRAGMENTS, "libB": [], "libC": []},
        trait_path="crate::Trait",
    )


@pytest.fixture()
def sub_assign_script_path() -> Path:
    """The rustdoc-generated ``core::ops::SubAssign`` loader script."""
    return FIXTURES / "implementors" / "core" / "ops" / "trait.SubAssign.js"
