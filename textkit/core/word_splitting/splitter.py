from __future__ import annotations
from typing import List

from textkit.core.classification.base import CharacterClassifier
from textkit.core.classification.classifier import default_classifier
from textkit.core.word_splitting.base import WordSplitter
from textkit.core.word_splitting.config import WordSplitConfig


class NaturalWordSplitter(WordSplitter):
    """
    Adapter: a word is a run of letters that may carry continuation
    characters (apostrophe, hyphen) once it has started.
      - digits neither start nor extend a word ("1bar" -> ["bar"])
      - "don't-stop" stays one word
      - a trailing continuation is kept ("rock-" -> ["rock-"])
    """

    def __init__(
        self,
        config: WordSplitConfig | None = None,
        classifier: CharacterClassifier | None = None,
    ):
        self.cfg = config or WordSplitConfig()
        self.classifier = classifier or default_classifier

    def split(self, text: str) -> List[str]:
        words: List[str] = []
        start = -1  # index of the open word, -1 when closed
        s = text or ""
        for i, ch in enumerate(s):
            if self.classifier.is_letter(ch):
                if start < 0:
                    start = i
            elif start >= 0 and ch in self.cfg.continuation_chars:
                continue
            elif start >= 0:
                words.append(s[start:i])
                start = -1
        if start >= 0:
            words.append(s[start:])
        return words

    def count(self, text: str) -> int:
        n = 0
        in_word = False
        for ch in text or "":
            if self.classifier.is_letter(ch):
                if not in_word:
                    in_word = True
                    n += 1
            elif in_word and ch in self.cfg.continuation_chars:
                continue
            else:
                in_word = False
        return n


default_word_splitter = NaturalWordSplitter()
