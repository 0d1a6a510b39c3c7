from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum


class CharacterClass(str, Enum):
    LETTER = "letter"
    DIGIT = "digit"
    OTHER = "other"


class CharacterClassifier(ABC):
    """Port: classify one code point as a letter, a digit, or anything else."""

    @abstractmethod
    def classify(self, ch: str) -> CharacterClass: ...

    def is_letter(self, ch: str) -> bool:
        return self.classify(ch) is CharacterClass.LETTER

