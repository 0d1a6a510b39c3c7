from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from textkit.core.classification.base import CharacterClass


@dataclass(frozen=True)
class WordToken:
    """One maximal run of letters, or of digits, taken from the source."""

    text: str
    char_class: CharacterClass

    def __str__(self) -> str:
        return self.text


class WordTokenizer(ABC):
    """Port: split a string into letter/digit word tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> List[WordToken]: ...
