from __future__ import annotations
import unicodedata
from functools import lru_cache

from textkit.core.classification.base import CharacterClass, CharacterClassifier


@lru_cache(maxsize=4096)
def _classify_code_point(ch: str) -> CharacterClass:
    category = unicodedata.category(ch)
    if category[0] == "L":
        return CharacterClass.LETTER
    if category == "Nd":
        return CharacterClass.DIGIT
    return CharacterClass.OTHER


class UnicodeCharacterClassifier(CharacterClassifier):
    """
    Adapter: classifies by Unicode general category.
      - L* (Lu, Ll, Lt, Lm, Lo) -> LETTER
      - Nd (decimal digits in any script) -> DIGIT
      - everything else, including No/Nl numerics, marks, symbols, emoji -> OTHER
    """

    def classify(self, ch: str) -> CharacterClass:
        if len(ch) != 1:
            return CharacterClass.OTHER
        return _classify_code_point(ch)


default_classifier = UnicodeCharacterClassifier()
