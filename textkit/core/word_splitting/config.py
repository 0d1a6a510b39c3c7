from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet

from textkit.messages.transform_messages import INVALID_CONTINUATION
from textkit.utils.exceptions import InvalidConfigError


def default_continuations() -> FrozenSet[str]:
    return frozenset({"'", "-"})


@dataclass(frozen=True)
class WordSplitConfig:
    # may extend an open word, never start one
    continuation_chars: FrozenSet[str] = field(default_factory=default_continuations)

    def __post_init__(self):
        chars = frozenset(self.continuation_chars)
        bad = [c for c in chars if not isinstance(c, str) or len(c) != 1]
        if bad:
            raise InvalidConfigError(
                code="INVALID_CONTINUATION",
                message=INVALID_CONTINUATION.format(value=bad),
            )
        object.__setattr__(self, "continuation_chars", chars)
