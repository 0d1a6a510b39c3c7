from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizationConfig:
    split_on_class_change: bool = True  # letter<->digit is a boundary
    keep_digits: bool = True  # emit digit runs as tokens
