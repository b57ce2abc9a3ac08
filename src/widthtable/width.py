"""
Display-width measurement for cell values.

A cell value is either plain text, measured glyph by glyph with ``wcwidth``,
or an object that knows its own rendered width (``StringWidther``). The
latter is what lets a cell carry terminal escape sequences: the rendered
string is longer than what the user sees, so the width has to travel with it.

Example:
    >>> string_and_width("你好")
    ('你好', 4)
    >>> string_and_width(Styled.ansi("ok", 32))
    ('\\x1b[32mok\\x1b[0m', 2)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from wcwidth import wcswidth, wcwidth

from .exceptions import UnsupportedValueError

# CSI sequences (colors, cursor movement) and OSC sequences (hyperlinks).
ESCAPE_PATTERN = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")

SGR_RESET = "\x1b[0m"

ZWJ = "\u200d"


@runtime_checkable
class StringWidther(Protocol):
    """A value that renders to a string whose display width it already knows."""

    def __str__(self) -> str: ...

    def width(self) -> int: ...


@dataclass(frozen=True)
class Styled:
    """
    Rendered text paired with an explicit display width.

    Attributes:
        text: The exact string written to the output, escapes included
        display_width: Number of terminal columns the text occupies
    """

    text: str
    display_width: int

    def __str__(self) -> str:
        return self.text

    def width(self) -> int:
        return self.display_width

    @classmethod
    def ansi(cls, text: str, *codes: int) -> Styled:
        """
        Wrap ``text`` in SGR escape codes.

        Example: bold red
            Styled.ansi("FAIL", 1, 31)
        """
        if not codes:
            return cls(text, display_width(text))
        params = ";".join(str(code) for code in codes)
        return cls(f"\x1b[{params}m{text}{SGR_RESET}", display_width(text))


def _char_width(ch: str) -> int:
    # wcwidth reports -1 for control characters; they take no columns.
    return max(wcwidth(ch), 0)


def _is_regional_indicator(ch: str) -> bool:
    return "\U0001f1e6" <= ch <= "\U0001f1ff"


def _extends_cluster(ch: str) -> bool:
    # Combining marks, variation selectors and skin-tone modifiers attach to
    # the glyph before them.
    if "\U0001f3fb" <= ch <= "\U0001f3ff":
        return True
    return wcwidth(ch) == 0


def _cluster_end(text: str, pos: int) -> int:
    """Index just past the glyph cluster that starts at ``pos``."""
    end = pos + 1
    # Flags are pairs of regional indicators.
    if (
        _is_regional_indicator(text[pos])
        and end < len(text)
        and _is_regional_indicator(text[end])
    ):
        end += 1
    while end < len(text):
        ch = text[end]
        if ch == ZWJ:
            end += 1
            if end < len(text) and not ESCAPE_PATTERN.match(text, end):
                end += 1
        elif _extends_cluster(ch):
            end += 1
        else:
            break
    return end


def display_width(text: str) -> int:
    """
    Number of terminal columns ``text`` occupies.

    Escape sequences count as zero. Falls back to a per-character sum when
    ``wcswidth`` refuses the string because of non-printable characters.
    """
    visible = ESCAPE_PATTERN.sub("", text)
    total = wcswidth(visible)
    if total < 0:
        total = sum(_char_width(ch) for ch in visible)
    return total


def string_and_width(value: object) -> tuple[str, int]:
    """
    Resolve a cell value to its rendered text and display width.

    Args:
        value: A ``str`` or a ``StringWidther``

    Returns:
        Tuple of (text, display width)

    Raises:
        UnsupportedValueError: For any other type
    """
    if isinstance(value, str):
        return value, display_width(value)
    # runtime_checkable only checks that the attribute exists.
    if isinstance(value, StringWidther) and callable(getattr(value, "width", None)):
        return str(value), value.width()
    raise UnsupportedValueError(value)


def truncate(text: str, max_width: int) -> tuple[str, int]:
    """
    Cut ``text`` so that it occupies at most ``max_width`` columns.

    Cuts only between glyph clusters: a double-width character that would
    straddle the limit is dropped whole, and combining marks, variation
    selectors and ZWJ emoji sequences are never split. Every candidate prefix
    is measured with ``display_width``, so the returned width always agrees
    with it. Escape sequences are kept and count as zero; if any were present
    in a shortened string, an SGR reset is appended so the styling does not
    leak into the padding.

    Args:
        text: Rendered text, possibly containing escape sequences
        max_width: Column budget (values below zero are treated as zero)

    Returns:
        Tuple of (shortened text, its display width). The text is returned
        unchanged when it already fits.
    """
    budget = max(max_width, 0)
    full = display_width(text)
    if full <= budget:
        return text, full

    kept = ""
    used = 0
    pos = 0
    saw_escape = False

    while pos < len(text):
        match = ESCAPE_PATTERN.match(text, pos)
        if match:
            kept += match.group()
            saw_escape = True
            pos = match.end()
            continue
        end = _cluster_end(text, pos)
        candidate = kept + text[pos:end]
        w = display_width(candidate)
        if w > budget:
            break
        kept, used = candidate, w
        pos = end

    if saw_escape:
        kept += SGR_RESET
    return kept, used
