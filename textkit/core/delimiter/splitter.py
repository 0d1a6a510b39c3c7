from __future__ import annotations
import logging
from typing import List

from textkit.messages.transform_messages import EMPTY_SEPARATOR

logger = logging.getLogger(__name__)


def split_ex(s: str, sep: str, remove_empty: bool = False) -> List[str]:
    """
    Split `s` on every literal occurrence of `sep`.

    With `remove_empty`, empty segments are skipped, including an empty
    tail after a trailing separator. An empty `sep` yields no segments.
    """
    if not sep:
        logger.debug(EMPTY_SEPARATOR)
        return []

    segments: List[str] = []
    rest = s or ""
    while True:
        i = rest.find(sep)
        if i < 0:
            break
        head = rest[:i]
        if head or not remove_empty:
            segments.append(head)
        rest = rest[i + len(sep) :]

    if rest or not remove_empty:
        segments.append(rest)
    return segments
