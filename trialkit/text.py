"""Text normalization and splitting helpers."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable, Sequence

_WS = "\t\n\f\r "

_SPACE_BOUNDARY = re.compile(r"[&\t\n\f\r ,.;:\-_+?!*\"/\\()\[\]]")
_NO_SPACE_BOUNDARY = re.compile("['`\u201c\u201d]")
_WHITESPACE = re.compile(f"[{_WS}]+")
_SENTENCE_BOUNDARY = re.compile(rf"[.?!;](?:[.?!;{_WS}]+|\Z)")
_SLASH = re.compile(rf"[{_WS}]*/[{_WS}]*")

_SCIENTIFIC_MULTIPLIERS = {
    form: f"e{exp}"
    for exp in range(2, 11)
    for form in (f"10^{exp}", f"10e{exp}", f"10{exp}")
}

_ROMAN_TO_ARABIC = {
    "i": "1",
    "ii": "2",
    "iii": "3",
    "iv": "4",
    "v": "5",
    "vi": "6",
}


def is_number(s: str) -> bool:
    """Return True if every character of ``s`` is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in s)


def strip_ctl_and_ext(s: str) -> str:
    """Decompose ``s`` (NFKD) and drop control and non-ASCII characters."""
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if 32 <= ord(ch) < 127)


def normalize_whitespace(s: str) -> str:
    """Collapse runs of whitespace into single spaces."""
    return _WHITESPACE.sub(" ", s)


def normalize_text(s: str) -> str:
    """Lower-case ``s``, replace punctuation with spaces and collapse whitespace."""
    norm = strip_ctl_and_ext(s).lower()
    norm = norm.replace("\\n", "\n")
    norm = _SPACE_BOUNDARY.sub(" ", norm)
    norm = _NO_SPACE_BOUNDARY.sub("", norm)
    norm = _WHITESPACE.sub(" ", norm)
    return norm.strip()


def split_whitespace(s: str) -> list[str]:
    """Split ``s`` on whitespace after trimming it."""
    return _WHITESPACE.split(s.strip())


def split_slash(s: str) -> list[str]:
    """Split ``s`` on slashes, dropping the spaces around them."""
    return _SLASH.split(s.strip())


def customize_slash(s: str) -> list[str]:
    """Return the slash-spacing variants of ``s``."""
    values = split_slash(s)
    return [
        "/".join(values),
        " / ".join(values),
        "/ ".join(values),
        " /".join(values),
    ]


def split_sentence(s: str) -> list[str]:
    """Split ``s`` at sentence-ending punctuation."""
    return _SENTENCE_BOUNDARY.split(s)


def to_name(s: str) -> str:
    """Turn ``s`` into a lower-case identifier joined by underscores."""
    s = s.lower().replace(",", " ").replace("/", " ")
    return _WHITESPACE.sub("_", s)


def is_yes_no(values: Sequence[str]) -> bool:
    """Return True if ``values`` holds exactly 'yes' and 'no' in some order."""
    if len(values) != 2:
        return False
    return sorted((v.strip() for v in values), reverse=True) == ["yes", "no"]


def join(values: Sequence[str], sep1: str, sep2: str) -> str:
    """Join with ``sep1``, using ``sep2`` before the last element."""
    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    return sep1.join(values[:-1]) + sep2 + values[-1]


def letter_prefix(s: str) -> str:
    """Return the leading run of letters in ``s``."""
    for i, ch in enumerate(s):
        if not ch.isalpha():
            return s[:i]
    return s


def _is_separator(ch: str) -> bool:
    if ord(ch) <= 0x7F:
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdecimal():
        return False
    return ch.isspace()


def _title(s: str) -> str:
    out = []
    prev = " "
    for ch in s:
        if _is_separator(prev):
            titled = ch.title()
            out.append(titled if len(titled) == 1 else ch)
        else:
            out.append(ch)
        prev = ch
    return "".join(out)


def titles(values: Iterable[str]) -> list[str]:
    """Capitalize the first letter of each word of every string."""
    return [_title(v) for v in values]


def normalize_scientific_multiplier(s: str) -> str:
    """Rewrite a power-of-ten multiplier such as '10^6' as 'e6'."""
    return _SCIENTIFIC_MULTIPLIERS.get(s, s)


def is_roman_numeral(s: str) -> bool:
    """Return True if ``s`` is a lower-case roman numeral from i to vi."""
    return s in _ROMAN_TO_ARABIC


def roman_to_arabic(s: str) -> str:
    """Convert a roman numeral from i to vi to arabic; other strings pass through."""
    return _ROMAN_TO_ARABIC.get(s, s)