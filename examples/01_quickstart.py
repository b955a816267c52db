#!/usr/bin/env python3
"""Example: Quickstart — implreg

Load the built-in ``core::ops::SubAssign`` table, publish it into a
host that is not ready yet, then let the host pick it up.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install implreg
"""
from __future__ import annotations

import implreg


class Viewer:
    """Minimal stand-in for a documentation viewer."""

    def __init__(self) -> None:
        self.tables: dict[str, implreg.ImplementorRegistry] = {}

    def register_implementors(self, registry: implreg.ImplementorRegistry) -> None:
        self.tables[registry.trait_path or "?"] = registry


def main() -> None:
    print(f"implreg version: {implreg.__version__}")
    print(f"Tables: {', '.join(implreg.available_tables())}")

    registry = implreg.load_table("core::ops::SubAssign")
    print(f"Loaded {registry!r}")

    # Host still initializing: the registry waits in the hand-off slot
    host = implreg.HostEnvironment()
    outcome = implreg.publish_to_host(registry, host)
    print(f"Publish outcome: {outcome.name}")

    # Host becomes ready and drains the slot
    viewer = Viewer()
    host.install_hook(viewer.register_implementors)
    for library in registry.populated_libraries():
        print(f"  {library}: {len(viewer.tables['core::ops::SubAssign'][library])} implementor(s)")

    # Ready host: later loads are delivered straight away
    outcome = implreg.publish_to_host(registry, host)
    print(f"Second publish outcome: {outcome.name}")


if __name__ == "__main__":
    main()
