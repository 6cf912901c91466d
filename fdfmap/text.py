"""Small text helpers used when reading map files."""

from __future__ import annotations

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

# Characters skipped before a number: space and the control codes 7 to 13.
_LEADING_BLANKS = frozenset(" " + "".join(chr(code) for code in range(7, 14)))


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    value %= _INT_RANGE
    return value - _INT_RANGE if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading spaces and control characters 7 to 13 are skipped, one optional
    sign is accepted, then ASCII digits are read until the first non-digit.
    Text without digits gives 0. The result is kept within a signed 32-bit
    integer, wrapping on overflow.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _LEADING_BLANKS:
        position += 1
    negative = False
    if position < length and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    end = position
    while end < length and _is_digit(text[end]):
        end += 1
    value = int(text[position:end]) if end > position else 0
    return _wrap_int(-value if negative else value)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    Everything from the first newline onwards is ignored.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    first_line = text.split("\n", 1)[0]
    return [word for word in first_line.split(sep) if word]


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int:
    """Find ``needle`` entirely within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or -1 when
    there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    return haystack[:limit].find(needle)