"""Terminal text utilities: ANSI handling, width measurement, truncation.

Provides functions for measuring visible terminal widths, stripping and
tracking ANSI SGR state, word-wrapping text with ANSI codes preserved, and
cutting lines to a column budget without leaving colour state behind.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"                # CSI: params, intermediates, final
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"     # OSC
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"      # APC
)

# Introducers whose sequences run until a terminator
_INTRODUCERS = ("\x1b[", "\x1b]", "\x1b_")

RESET = "\x1b[0m"

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

_EMOJI_JOINERS = frozenset((0xFE0F, 0x200D))  # VS16, ZWJ
_EMOJI_RANGES = ((0x1F3FB, 0x1F3FF), (0x1F1E6, 0x1F1FF))  # skin tones, flags


def _is_emoji_sequence(cluster: str) -> bool:
    for ch in cluster:
        cp = ord(ch)
        if cp in _EMOJI_JOINERS or any(lo <= cp <= hi for lo, hi in _EMOJI_RANGES):
            return True
    first = ord(cluster[0])
    return first >= 0x1F000 or 0x2600 <= first <= 0x27BF


def _grapheme_width(cluster: str) -> int:
    """Terminal columns taken by one grapheme cluster.

    Control characters are 0 wide, multi-codepoint emoji 2, and everything
    else is what wcwidth reports for the base character.
    """
    if not cluster:
        return 0

    if len(cluster) == 1:
        cp = ord(cluster)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(cluster), 0)

    if _is_emoji_sequence(cluster):
        return 2
    category = unicodedata.category(cluster[0])
    if category[0] == "M" or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(cluster[0]), 0)


# ---------------------------------------------------------------------------
# strip_ansi / visible_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove every recognised escape sequence from *text*."""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI escape sequences.
    * Treats tabs as 3 spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    stripped = stripped.replace("\t", "   ")

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* visible columns."""
    missing = width - visible_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


# ---------------------------------------------------------------------------
# Escape sequences and display segments
# ---------------------------------------------------------------------------

def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an ANSI escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` where *code* is the full escape sequence string
    and *length* is the number of characters consumed, or ``None`` if there is
    no complete escape sequence at *pos*.

    Handles:
    * CSI sequences: ``ESC[``, parameter bytes ``0-?``, intermediate bytes
      `` -/``, one final byte ``@-~`` (covers colon-form SGR and private
      modes like ``ESC[?25l``)
    * OSC sequences: ``ESC]`` ... ``BEL`` / ``ST``
    * APC sequences: ``ESC_`` ... ``BEL`` / ``ST``
    """
    if pos + 1 >= len(text) or text[pos] != "\x1b":
        return None

    next_ch = text[pos + 1]

    if next_ch == "[":
        i = pos + 2
        while i < len(text) and "0" <= text[i] <= "?":
            i += 1
        while i < len(text) and " " <= text[i] <= "/":
            i += 1
        if i < len(text) and "@" <= text[i] <= "~":
            return (text[pos : i + 1], i + 1 - pos)
        return None

    if next_ch in "]_":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch == "\x07":
                return (text[pos : i + 1], i + 1 - pos)
            if ch == "\x1b" and i + 1 < len(text) and text[i + 1] == "\\":
                return (text[pos : i + 2], i + 2 - pos)
            i += 1
        return None

    return None


def _split_display(text: str) -> Iterator[tuple[str, int | None]]:
    """Walk *text* as escape sequences and grapheme clusters.

    Yields ``(piece, width)``; escape sequences come with width ``None`` and
    tabs count as three columns.  A CSI, OSC or APC introducer with no
    terminator before the end of *text* ends the walk, so callers never copy
    half a sequence.  A lone ESC is passed through with no width.
    """
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            extracted = extract_ansi_code(text, i)
            if extracted is not None:
                code, length = extracted
                yield code, None
                i += length
                continue
            if text.startswith(_INTRODUCERS, i):
                return
            yield "\x1b", None
            i += 1
            continue

        end = text.find("\x1b", i)
        if end < 0:
            end = len(text)
        for cluster in grapheme.graphemes(text[i:end]):
            yield cluster, (3 if cluster == "\t" else _grapheme_width(cluster))
        i = end


# ---------------------------------------------------------------------------
# AnsiCodeTracker
# ---------------------------------------------------------------------------

class AnsiCodeTracker:
    """Track the SGR codes active since the last reset.

    Wrapped continuation lines re-apply the active codes so colours survive a
    line break, and finished lines get a reset when anything is still on.
    """

    def __init__(self) -> None:
        self._active: list[str] = []

    def process(self, code: str) -> None:
        """Update tracked state from an SGR sequence like ``\\x1b[1;31m``."""
        if not code.startswith("\x1b[") or not code.endswith("m"):
            return
        params = code[2:-1]
        if params in ("", "0") or params.endswith(";0"):
            self._active.clear()
            return
        self._active.append(code)

    def get_active_codes(self) -> str:
        return "".join(self._active)

    def has_active_codes(self) -> bool:
        return bool(self._active)

    def get_line_end_reset(self) -> str:
        """Return a reset sequence if any attribute is active, else empty."""
        return RESET if self._active else ""


# ---------------------------------------------------------------------------
# wrap_text_with_ansi
# ---------------------------------------------------------------------------

def wrap_text_with_ansi(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns, preserving ANSI escape codes.

    Handles embedded newlines by processing each physical line separately.
    ANSI state is tracked across lines so that colours/attributes persist
    correctly after wrapping.

    Returns a list of wrapped lines (without trailing newlines).
    """
    if width <= 0:
        return [text]

    result: list[str] = []
    tracker = AnsiCodeTracker()
    for physical_line in text.split("\n"):
        result.extend(_wrap_single_line(physical_line, width, tracker))
    return result


def _wrap_single_line(
    line: str,
    width: int,
    tracker: AnsiCodeTracker,
) -> list[str]:
    if not line:
        return [""]

    finished: list[str] = []
    parts = [tracker.get_active_codes()]
    used = 0

    for piece, piece_width in _split_display(line):
        if piece_width is None:
            tracker.process(piece)
            parts.append(piece)
            continue

        if used + piece_width > width and used > 0:
            split = _find_word_break(parts)
            before, carried = split if split is not None else ("".join(parts), "")
            finished.append(before + tracker.get_line_end_reset())
            parts = [tracker.get_active_codes(), carried]
            used = visible_width(carried)

        parts.append("   " if piece == "\t" else piece)
        used += piece_width

    finished.append("".join(parts) + tracker.get_line_end_reset())
    return finished


def _find_word_break(parts: list[str]) -> tuple[str, str] | None:
    """Split the accumulated *parts* at their last visible space.

    Returns ``(before, after)`` with leading spaces dropped from ``after``
    (escape codes among them are kept), or ``None`` when the line holds no
    space with visible text in front of it.
    """
    pieces = list(_split_display("".join(parts)))
    visible = [k for k, (_, w) in enumerate(pieces) if w is not None]
    spaces = [k for k in visible if pieces[k][0] == " "]
    if not spaces or spaces[-1] == visible[0]:
        return None

    cut = spaces[-1]
    before = "".join(piece for piece, _ in pieces[:cut])
    after: list[str] = []
    leading = True
    for piece, w in pieces[cut:]:
        if leading and piece == " ":
            continue
        if w is not None:
            leading = False
        after.append(piece)
    return (before, "".join(after))


# ---------------------------------------------------------------------------
# truncate_to_width / truncate_display
# ---------------------------------------------------------------------------

def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    If the text is wider than *max_width*, it is truncated and *ellipsis* is
    appended (the ellipsis counts towards the width).
    """
    if max_width <= 0:
        return ""

    if visible_width(text) <= max_width:
        return text

    target_width = max_width - visible_width(ellipsis)
    if target_width <= 0:
        return _take_columns(ellipsis, max_width)[0]

    return _take_columns(text, target_width)[0] + ellipsis


def _take_columns(text: str, max_cols: int) -> tuple[str, int]:
    """Longest prefix of *text* within *max_cols* columns, and its width.

    Escape sequences are copied whole until the budget is spent; a cluster
    that would overflow stops the copy.
    """
    result: list[str] = []
    cols = 0
    for piece, width in _split_display(text):
        if cols >= max_cols:
            break
        if width is None:
            result.append(piece)
            continue
        if cols + width > max_cols:
            break
        result.append("   " if piece == "\t" else piece)
        cols += width
    return "".join(result), cols


def truncate_display(line: str, max_columns: int) -> str:
    """Cut *line* to *max_columns* visible columns without breaking escapes.

    Escape sequences cost nothing against the budget and are copied whole.
    A line that already fits is returned unchanged.  Otherwise copying stops
    once the budget is spent and a reset is appended so colour state cannot
    bleed into whatever the terminal prints next.  A wide cluster straddling
    the boundary is replaced by spaces so the result is exactly
    *max_columns* wide.
    """
    if visible_width(line) <= max_columns:
        return line

    prefix, cols = _take_columns(line, max_columns)
    return prefix + " " * (max_columns - cols) + RESET
