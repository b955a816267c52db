"""Reading and writing rustdoc implementor loader scripts.

rustdoc emits one script per trait under ``implementors/``.  The script
builds the registry literal and hands it to the page::

    (function() {var implementors = {};
    implementors['libc'] = [];implementors['winit'] = ["impl ...",];

                if (window.register_implementors) {
                    window.register_implementors(implementors);
                } else {
                    window.pending_implementors = implementors;
                }

    })()

:func:`render_script` produces this layout byte for byte;
:func:`parse_script` reads it (or any whitespace variation of it) back.
Fragment strings are written with JSON string escaping, which is valid
JavaScript.
"""
from __future__ import annotations

import json
import logging
import re

from implreg.core.registry import ImplementorRegistry

logger = logging.getLogger(__name__)

_PREAMBLE = "(function() {var implementors = {};\n"
_EPILOGUE = (
    "\n"
    "\n"
    "            if (window.register_implementors) {\n"
    "                window.register_implementors(implementors);\n"
    "            } else {\n"
    "                window.pending_implementors = implementors;\n"
    "            }\n"
    "        \n"
    "})()\n"
)

_PREAMBLE_RE = re.compile(r"\s*\(function\s*\(\)\s*\{\s*var\s+implementors\s*=\s*\{\}\s*;")
_ENTRY_RE = re.compile(
    r"""\s*implementors\[(?:'(?P<single>(?:[^'\\]|\\.)*)'|(?P<double>"(?:[^"\\]|\\.)*"))\]\s*=\s*\["""
)
_FRAGMENT_RE = re.compile(r'\s*(?P<literal>"(?:[^"\\]|\\.)*")\s*(?P<comma>,)?')
_CLOSE_RE = re.compile(r"\s*\]\s*;")
_TAIL_RE = re.compile(r"\s*(?:if\s*\(|\}\s*\)\s*\(\s*\))")
_ESCAPE_RE = re.compile(r"\\(.)")


class ScriptFormatError(ValueError):
    """Raised when a loader script cannot be parsed."""

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


def _quote_library(library: str) -> str:
    return "'" + library.replace("\\", "\\\\").replace("'", "\\'") + "'"


def render_script(registry: ImplementorRegistry) -> str:
    """Render ``registry`` as a rustdoc implementor loader script."""
    entries = []
    for library, fragments in registry.items():
        items = "".join(json.dumps(fragment, ensure_ascii=False) + "," for fragment in fragments)
        entries.append(f"implementors[{_quote_library(library)}] = [{items}];")
    return _PREAMBLE + "".join(entries) + _EPILOGUE


def _decode_string(literal: str, offset: int) -> str:
    try:
        value = json.loads(literal)
    except json.JSONDecodeError as exc:
        raise ScriptFormatError(f"invalid string literal ({exc.msg})", offset) from exc
    return value


def parse_script(text: str, trait_path: str | None = None) -> ImplementorRegistry:
    """Parse a loader script back into a registry.

    Parameters
    ----------
    text:
        The full script source.
    trait_path:
        Trait to attach to the result.  Scripts do not name their trait
        (rustdoc encodes it in the file path), so callers supply it.

    Raises
    ------
    ScriptFormatError
        If the script does not follow the loader layout.
    implreg.core.registry.DuplicateLibraryError
        If a library is assigned twice.
    """
    match = _PREAMBLE_RE.match(text)
    if match is None:
        raise ScriptFormatError("expected '(function() {var implementors = {};'", 0)
    pos = match.end()
    pairs: list[tuple[str, list[str]]] = []

    while True:
        entry = _ENTRY_RE.match(text, pos)
        if entry is None:
            break
        if entry.group("double") is not None:
            library = _decode_string(entry.group("double"), entry.start("double"))
        else:
            library = _ESCAPE_RE.sub(r"\1", entry.group("single"))
        pos = entry.end()

        fragments: list[str] = []
        while True:
            close = _CLOSE_RE.match(text, pos)
            if close is not None:
                pos = close.end()
                break
            item = _FRAGMENT_RE.match(text, pos)
            if item is None:
                raise ScriptFormatError(f"expected a string or ']' in the list for {library!r}", pos)
            fragments.append(_decode_string(item.group("literal"), item.start("literal")))
            pos = item.end()
            if item.group("comma") is None and _CLOSE_RE.match(text, pos) is None:
                raise ScriptFormatError(f"expected ',' or ']' in the list for {library!r}", pos)
        pairs.append((library, fragments))

    if _TAIL_RE.match(text, pos) is None:
        raise ScriptFormatError("expected an implementors assignment or the registration tail", pos)

    logger.debug("Parsed %d implementor entries from loader script", len(pairs))
    return ImplementorRegistry(pairs, trait_path=trait_path)


def trait_path_from_filename(name: str) -> str | None:
    """Guess the trait path from a rustdoc implementors file path.

    ``implementors/core/ops/trait.SubAssign.js`` becomes
    ``core::ops::SubAssign``.  Returns ``None`` for paths that do not
    follow the ``trait.<Name>.js`` convention.
    """
    parts = name.replace("\\", "/").split("/")
    if "implementors" in parts:
        parts = parts[len(parts) - parts[::-1].index("implementors"):]
    else:
        parts = parts[-1:]
    leaf = parts[-1]
    if not (leaf.startswith("trait.") and leaf.endswith(".js")):
        return None
    return "::".join([*parts[:-1], leaf[len("trait."):-len(".js")]])
