from __future__ import annotations
from typing import List, Optional

from textkit.core.classification.base import CharacterClass, CharacterClassifier
from textkit.core.classification.classifier import default_classifier
from textkit.core.tokenization.base import WordToken, WordTokenizer
from textkit.core.tokenization.config import TokenizationConfig


class CharacterClassTokenizer(WordTokenizer):
    """
    Adapter: one left-to-right scan over code points.
      - OTHER code points close the open token and are dropped
      - a LETTER/DIGIT opens a new token when none is open or the class changed
      - case changes inside a run never split it ("FooBar" is one token)
    Concatenating the emitted tokens gives back exactly the letters and digits
    of the input, in order.
    """

    def __init__(
        self,
        config: TokenizationConfig | None = None,
        classifier: CharacterClassifier | None = None,
    ):
        self.cfg = config or TokenizationConfig()
        self.classifier = classifier or default_classifier

    def tokenize(self, text: str) -> List[WordToken]:
        tokens: List[WordToken] = []
        buf: List[str] = []
        open_class: Optional[CharacterClass] = None  # class of the open token

        for ch in text or "":
            cls = self.classifier.classify(ch)
            if cls is CharacterClass.OTHER:
                if buf:
                    tokens.append(WordToken("".join(buf), open_class))
                    buf = []
                continue
            if buf and cls is not open_class and self.cfg.split_on_class_change:
                tokens.append(WordToken("".join(buf), open_class))
                buf = []
            if not buf:
                open_class = cls
            buf.append(ch)

        if buf:
            tokens.append(WordToken("".join(buf), open_class))

        if not self.cfg.keep_digits:
            return [t for t in tokens if t.char_class is not CharacterClass.DIGIT]
        return tokens


default_tokenizer = CharacterClassTokenizer()
