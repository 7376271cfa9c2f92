"""Code point decoding helpers that never split a surrogate pair.

Text reaching the scanner may come from UTF-16 based toolkits and still carry
surrogate pairs as two separate string elements. These helpers decode one code
point at a time and report how many string elements it occupies.
"""

from __future__ import annotations

__all__ = ["codepoint_at", "codepoint_before"]

_HIGH_SURROGATE_MIN = 0xD800
_HIGH_SURROGATE_MAX = 0xDBFF
_LOW_SURROGATE_MIN = 0xDC00
_LOW_SURROGATE_MAX = 0xDFFF
_SUPPLEMENTARY_MIN = 0x10000


def codepoint_at(text: str, index: int) -> tuple[int, int]:
    """Decode the code point starting at ``index`` and return ``(code_point, width)``."""

    if not 0 <= index < len(text):
        raise IndexError("codepoint_at index out of range")
    high = ord(text[index])
    if _is_high(high) and index + 1 < len(text):
        low = ord(text[index + 1])
        if _is_low(low):
            return _combine(high, low), 2
    return high, 1


def codepoint_before(text: str, index: int) -> tuple[int, int]:
    """Decode the code point ending just before ``index`` and return ``(code_point, width)``."""

    if not 0 < index <= len(text):
        raise IndexError("codepoint_before index out of range")
    low = ord(text[index - 1])
    if _is_low(low) and index - 2 >= 0:
        high = ord(text[index - 2])
        if _is_high(high):
            return _combine(high, low), 2
    return low, 1


def _is_high(unit: int) -> bool:
    return _HIGH_SURROGATE_MIN <= unit <= _HIGH_SURROGATE_MAX


def _is_low(unit: int) -> bool:
    return _LOW_SURROGATE_MIN <= unit <= _LOW_SURROGATE_MAX


def _combine(high: int, low: int) -> int:
    return _SUPPLEMENTARY_MIN + ((high - _HIGH_SURROGATE_MIN) << 10) + (low - _LOW_SURROGATE_MIN)
