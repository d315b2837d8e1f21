"""Text handling for the search query box and the rendered result rows."""

from __future__ import annotations

import json
import re
import unicodedata
from typing import Iterable

_ESCAPE_CODE_RE = re.compile(r"\d\d;rgb:[0-9a-f]{4}/[0-9a-f]{4}/[0-9a-f]{4}", re.ASCII)

_WORD_BREAKS = frozenset(" -")

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def calculate_word_boundaries(text: str) -> list[int]:
    """Positions the cursor stops at when jumping a word left or right.

    A boundary is the start of the text, the first character of each run of
    spaces and dashes, and the end of the text unless it ends in such a run.
    """
    boundaries = [0]
    prev_was_breaking = False
    for idx, char in enumerate(text):
        if char in _WORD_BREAKS:
            if not prev_was_breaking:
                boundaries.append(idx)
            prev_was_breaking = True
        else:
            prev_was_breaking = False
    if not prev_was_breaking:
        boundaries.append(len(text))
    return boundaries


def sanitize_escape_codes(text: str) -> str:
    """Remove terminal colour-query replies that leak into the input."""
    return _ESCAPE_CODE_RE.sub("", text)


def _is_printable(char: str) -> bool:
    if char == " ":
        return True
    return char.isprintable() and unicodedata.category(char) not in ("Zs", "Zl", "Zp")


def _quote(text: str) -> str:
    """Double-quote ``text`` with backslash escapes for unprintable characters."""
    parts = ['"']
    for char in text:
        if char in _SHORT_ESCAPES:
            parts.append(_SHORT_ESCAPES[char])
        elif _is_printable(char):
            parts.append(char)
        else:
            code = ord(char)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def command_escaper(cmd: str) -> str:
    """Show multi-line or tab-containing commands as a quoted, escaped string."""
    if "\n" not in cmd and "\t" not in cmd:
        return cmd
    return _quote(cmd)


def _json_string(text: str) -> str:
    encoded = json.dumps(text, ensure_ascii=False)
    return "".join(_JSON_HTML_ESCAPES.get(char, char) for char in encoded)


def build_initial_query_with_search_escaping(chunks: Iterable[str]) -> str:
    """Join query words with spaces, quoting words that start with a dash.

    Quoting stops a leading dash from being read as a negated search term.
    """
    return " ".join(
        _json_string(chunk) if chunk.startswith("-") else chunk for chunk in chunks
    )


def split_query_array(chunks: Iterable[str]) -> list[str]:
    """Split every chunk on single spaces and flatten the result."""
    return [word for chunk in chunks for word in chunk.split(" ")]