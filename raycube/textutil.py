"""Small string helpers used by the map and configuration parser."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is honoured and
    parsing stops at the first non-digit. Text without digits yields 0.
    The result wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int(-number if negative else number)


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> str | None:
    """Find ``needle`` wholly within the first ``limit`` characters.

    Returns the rest of ``haystack`` from the match, the whole haystack
    for an empty needle, or None when there is no match.
    """
    if not needle:
        return haystack
    index = haystack[:max(limit, 0)].find(needle)
    if index < 0:
        return None
    return haystack[index:]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had,
    counting only ``size`` characters of ``dst`` when it is longer.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    kept = min(len(dst), size)
    if kept == size:
        return dst, kept + len(src)
    room = max(size - kept - 1, 0)
    return dst + src[:room], kept + len(src)


def strcmp(a: str | None, b: str | None) -> int:
    """Compare two strings for equality.

    Returns 0 when equal, -1 when either is missing or the lengths differ,
    and -2 when the lengths match but the contents differ.
    """
    if a is None or b is None or len(a) != len(b):
        return -1
    return 0 if a == b else -2


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, or 0.
    Positions past the end of a string compare as a NUL character.
    """
    for pos in range(max(n, 0)):
        ca = ord(a[pos]) if pos < len(a) else 0
        cb = ord(b[pos]) if pos < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0