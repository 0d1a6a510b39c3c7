from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class WordSplitter(ABC):
    """Port: pull natural-language words out of free text."""

    @abstractmethod
    def split(self, text: str) -> List[str]: ...

    def count(self, text: str) -> int:
        return len(self.split(text))
