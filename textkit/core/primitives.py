"""
Single-purpose string helpers: first-letter case flips, wrap/unwrap,
reversal and the string type check. All offsets are code points.

Case changes map one code point to exactly one code point, so a word keeps
its length and never gains a combining mark ("İ" lowers to "i", "ß" stays
"ß" when upper-cased).
"""

from __future__ import annotations
import unicodedata
from typing import Any


def _single(ch: str, mapped: str) -> str:
    if len(mapped) == 1:
        return mapped
    base = "".join(c for c in mapped if not unicodedata.combining(c))
    return base if len(base) == 1 else ch


def to_lower(s: str) -> str:
    return "".join(_single(ch, ch.lower()) for ch in s)


def to_upper(s: str) -> str:
    return "".join(_single(ch, ch.upper()) for ch in s)


def capitalize(s: str) -> str:
    """Upper-case the first code point and lower-case the rest."""
    if not s:
        return ""
    return to_upper(s[0]) + to_lower(s[1:])


def upper_first(s: str) -> str:
    if not s:
        return ""
    return to_upper(s[0]) + s[1:]


def lower_first(s: str) -> str:
    if not s:
        return ""
    return to_lower(s[0]) + s[1:]


def wrap(s: str, token: str) -> str:
    if not s or not token:
        return s
    return f"{token}{s}{token}"


def unwrap(s: str, token: str) -> str:
    """
    Strip one leading and one trailing `token`. Both must be present and
    must not overlap, otherwise `s` comes back unchanged.
    """
    if not s or not token:
        return s
    if len(s) < 2 * len(token):
        return s
    if s.startswith(token) and s.endswith(token):
        return s[len(token) : len(s) - len(token)]
    return s


def reverse(s: str) -> str:
    return s[::-1]


def is_string(value: Any) -> bool:
    return isinstance(value, str)
