"""Implementors of ``core::ops::SubAssign``.

Generated from the documentation of the winit dependency tree.  Each
fragment is pre-rendered markup and is kept verbatim, including the
repeated entries the generator emitted for re-exported types.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from implreg.tables.base import ImplementorTable, table_registry

TRAIT_PATH = "core::ops::SubAssign"

IMPLEMENTORS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "libloading": (),
    "libc": (),
    "dlib": (),
    "wayland_sys": (),
    "shared_library": (),
    "wayland_client": (
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/shell/WlShellSurfaceResize/struct.WlShellSurfaceResize.html' title='wayland_client::wayland::shell::WlShellSurfaceResize::WlShellSurfaceResize'>WlShellSurfaceResize</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/shell/WlShellSurfaceTransient/struct.WlShellSurfaceTransient.html' title='wayland_client::wayland::shell::WlShellSurfaceTransient::WlShellSurfaceTransient'>WlShellSurfaceTransient</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/seat/WlSeatCapability/struct.WlSeatCapability.html' title='wayland_client::wayland::seat::WlSeatCapability::WlSeatCapability'>WlSeatCapability</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/output/WlOutputMode/struct.WlOutputMode.html' title='wayland_client::wayland::output::WlOutputMode::WlOutputMode'>WlOutputMode</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/output/WlOutputMode/struct.WlOutputMode.html' title='wayland_client::wayland::output::WlOutputMode::WlOutputMode'>WlOutputMode</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/seat/WlSeatCapability/struct.WlSeatCapability.html' title='wayland_client::wayland::seat::WlSeatCapability::WlSeatCapability'>WlSeatCapability</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/shell/WlShellSurfaceResize/struct.WlShellSurfaceResize.html' title='wayland_client::wayland::shell::WlShellSurfaceResize::WlShellSurfaceResize'>WlShellSurfaceResize</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a> for <a class='struct' href='wayland_client/wayland/shell/WlShellSurfaceTransient/struct.WlShellSurfaceTransient.html' title='wayland_client::wayland::shell::WlShellSurfaceTransient::WlShellSurfaceTransient'>WlShellSurfaceTransient</a>",
    ),
    "tempfile": (),
    "wayland_window": (
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a>&lt;<a class='struct' href='wayland_client/sys/wayland/client/WlShellSurfaceResize/struct.WlShellSurfaceResize.html' title='wayland_client::sys::wayland::client::WlShellSurfaceResize::WlShellSurfaceResize'>WlShellSurfaceResize</a>&gt; for <a class='struct' href='wayland_client/sys/wayland/client/WlShellSurfaceResize/struct.WlShellSurfaceResize.html' title='wayland_client::sys::wayland::client::WlShellSurfaceResize::WlShellSurfaceResize'>WlShellSurfaceResize</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a>&lt;<a class='struct' href='wayland_client/sys/wayland/client/WlShellSurfaceTransient/struct.WlShellSurfaceTransient.html' title='wayland_client::sys::wayland::client::WlShellSurfaceTransient::WlShellSurfaceTransient'>WlShellSurfaceTransient</a>&gt; for <a class='struct' href='wayland_client/sys/wayland/client/WlShellSurfaceTransient/struct.WlShellSurfaceTransient.html' title='wayland_client::sys::wayland::client::WlShellSurfaceTransient::WlShellSurfaceTransient'>WlShellSurfaceTransient</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a>&lt;<a class='struct' href='wayland_client/sys/wayland/client/WlSeatCapability/struct.WlSeatCapability.html' title='wayland_client::sys::wayland::client::WlSeatCapability::WlSeatCapability'>WlSeatCapability</a>&gt; for <a class='struct' href='wayland_client/sys/wayland/client/WlSeatCapability/struct.WlSeatCapability.html' title='wayland_client::sys::wayland::client::WlSeatCapability::WlSeatCapability'>WlSeatCapability</a>",
        "impl <a class='trait' href='https://doc.rust-lang.org/nightly/core/ops/trait.SubAssign.html' title='core::ops::SubAssign'>SubAssign</a>&lt;<a class='struct' href='wayland_client/sys/wayland/client/WlOutputMode/struct.WlOutputMode.html' title='wayland_client::sys::wayland::client::WlOutputMode::WlOutputMode'>WlOutputMode</a>&gt; for <a class='struct' href='wayland_client/sys/wayland/client/WlOutputMode/struct.WlOutputMode.html' title='wayland_client::sys::wayland::client::WlOutputMode::WlOutputMode'>WlOutputMode</a>",
    ),
    "wayland_kbd": (),
    "winit": (),
})


@table_registry.register(TRAIT_PATH)
class SubAssignImplementors(ImplementorTable):
    trait_path = TRAIT_PATH

    def implementors(self) -> Mapping[str, Sequence[str]]:
        return IMPLEMENTORS
