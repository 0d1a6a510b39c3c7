from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from textkit.core.primitives import capitalize, to_lower, to_upper
from textkit.messages.transform_messages import INVALID_SEPARATOR, INVALID_TOKEN_CASE
from textkit.utils.exceptions import InvalidConfigError


class TokenCase(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZE = "capitalize"
    NONE = "none"

    def apply(self, text: str) -> str:
        if self is TokenCase.LOWER:
            return to_lower(text)
        if self is TokenCase.UPPER:
            return to_upper(text)
        if self is TokenCase.CAPITALIZE:
            return capitalize(text)
        return text

    @classmethod
    def coerce(cls, value: Union["TokenCase", str]) -> "TokenCase":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidConfigError(
                code="INVALID_TOKEN_CASE",
                message=INVALID_TOKEN_CASE.format(value=value),
            ) from None


@dataclass(frozen=True)
class JoinPolicy:
    separator: str = ""  # placed between tokens only
    first_token_case: TokenCase = TokenCase.NONE
    rest_token_case: TokenCase = TokenCase.NONE

    def __post_init__(self):
        if not isinstance(self.separator, str):
            raise InvalidConfigError(
                code="INVALID_SEPARATOR",
                message=INVALID_SEPARATOR.format(
                    type_name=type(self.separator).__name__
                ),
            )
        # frozen: normalize string case names through object.__setattr__
        object.__setattr__(
            self, "first_token_case", TokenCase.coerce(self.first_token_case)
        )
        object.__setattr__(
            self, "rest_token_case", TokenCase.coerce(self.rest_token_case)
        )


CAMEL_CASE = JoinPolicy("", TokenCase.LOWER, TokenCase.CAPITALIZE)
KEBAB_CASE = JoinPolicy("-", TokenCase.LOWER, TokenCase.LOWER)
UPPER_KEBAB_CASE = JoinPolicy("-", TokenCase.UPPER, TokenCase.UPPER)
SNAKE_CASE = JoinPolicy("_", TokenCase.LOWER, TokenCase.LOWER)
UPPER_SNAKE_CASE = JoinPolicy("_", TokenCase.UPPER, TokenCase.UPPER)

STYLE_POLICIES: Dict[str, JoinPolicy] = {
    "camel": CAMEL_CASE,
    "kebab": KEBAB_CASE,
    "upper_kebab": UPPER_KEBAB_CASE,
    "snake": SNAKE_CASE,
    "upper_snake": UPPER_SNAKE_CASE,
}
