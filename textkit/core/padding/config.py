from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from textkit.messages.transform_messages import (
    INVALID_PAD_PATTERN,
    INVALID_PAD_POSITION,
    INVALID_PAD_SIZE,
)
from textkit.utils.exceptions import InvalidConfigError


class PadPosition(str, Enum):
    START = "start"
    END = "end"
    BOTH = "both"

    @classmethod
    def coerce(cls, value: Union["PadPosition", str]) -> "PadPosition":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidConfigError(
                code="INVALID_PAD_POSITION",
                message=INVALID_PAD_POSITION.format(value=value),
            ) from None


@dataclass(frozen=True)
class PadSpec:
    target_size: int  # in code points
    pattern: str = " "
    position: PadPosition = PadPosition.BOTH

    def __post_init__(self):
        # bool is an int subclass but never a meaningful size
        if not isinstance(self.target_size, int) or isinstance(self.target_size, bool):
            raise InvalidConfigError(
                code="INVALID_PAD_SIZE",
                message=INVALID_PAD_SIZE.format(
                    type_name=type(self.target_size).__name__
                ),
            )
        if not isinstance(self.pattern, str):
            raise InvalidConfigError(
                code="INVALID_PAD_PATTERN",
                message=INVALID_PAD_PATTERN.format(
                    type_name=type(self.pattern).__name__
                ),
            )
        object.__setattr__(self, "position", PadPosition.coerce(self.position))
