"""Substring extraction around the first or last occurrence of a delimiter."""

from __future__ import annotations
import logging

from textkit.messages.transform_messages import DELIMITER_NOT_FOUND

logger = logging.getLogger(__name__)


def _not_found(s: str, delim: str) -> str:
    logger.debug(DELIMITER_NOT_FOUND.format(delim=delim))
    return s


def before(s: str, delim: str) -> str:
    if not s or not delim:
        return s
    i = s.find(delim)
    if i < 0:
        return _not_found(s, delim)
    return s[:i]


def before_last(s: str, delim: str) -> str:
    if not s or not delim:
        return s
    i = s.rfind(delim)
    if i < 0:
        return _not_found(s, delim)
    return s[:i]


def after(s: str, delim: str) -> str:
    if not s or not delim:
        return s
    i = s.find(delim)
    if i < 0:
        return _not_found(s, delim)
    return s[i + len(delim) :]


def after_last(s: str, delim: str) -> str:
    if not s or not delim:
        return s
    i = s.rfind(delim)
    if i < 0:
        return _not_found(s, delim)
    return s[i + len(delim) :]
