from __future__ import annotations
import logging
from typing import Tuple

from textkit.core.padding.config import PadPosition, PadSpec
from textkit.messages.transform_messages import EMPTY_PAD_PATTERN

logger = logging.getLogger(__name__)


def repeat_to_length(pattern: str, length: int) -> str:
    """Cycle `pattern` and cut the last repetition so the result is exactly `length` long."""
    if length <= 0 or not pattern:
        return ""
    reps, rest = divmod(length, len(pattern))
    return pattern * reps + pattern[:rest]


def split_need(need: int, position: PadPosition) -> Tuple[int, int]:
    """Return (left, right) pad lengths; BOTH puts the odd unit on the right."""
    if position is PadPosition.START:
        return need, 0
    if position is PadPosition.END:
        return 0, need
    left = need // 2
    return left, need - left


def apply_pad(spec: PadSpec, source: str) -> str:
    if len(source) >= spec.target_size:
        return source
    if not spec.pattern:
        logger.debug(EMPTY_PAD_PATTERN)
        return source

    left, right = split_need(spec.target_size - len(source), spec.position)
    return (
        repeat_to_length(spec.pattern, left)
        + source
        + repeat_to_length(spec.pattern, right)
    )
