"""
Public text-transformation surface.

Case conversion runs the character-class tokenizer once and joins the
tokens with a fixed ``JoinPolicy``; word counting uses the natural word
splitter. Every function is pure and total: degenerate input gives a
fallback value, never an exception.

    >>> to_kebab_case("Foo-#1😄$_%^&*(1bar")
    'foo-1-1-bar'
    >>> to_camel_case("Foo-#1😄$_%^&*(1bar")
    'foo11Bar'
"""

from __future__ import annotations
from typing import List, Union

from textkit.core.case_joining.config import (
    CAMEL_CASE,
    KEBAB_CASE,
    SNAKE_CASE,
    STYLE_POLICIES,
    UPPER_KEBAB_CASE,
    UPPER_SNAKE_CASE,
    JoinPolicy,
)
from textkit.core.case_joining.joiner import join_tokens
from textkit.core.delimiter.extract import after, after_last, before, before_last
from textkit.core.delimiter.splitter import split_ex
from textkit.core.padding.config import PadPosition, PadSpec
from textkit.core.padding.padder import apply_pad
from textkit.core.primitives import (
    capitalize,
    is_string,
    lower_first,
    reverse,
    unwrap,
    upper_first,
    wrap,
)
from textkit.core.tokenization.tokenizer import default_tokenizer
from textkit.core.word_splitting.splitter import default_word_splitter
from textkit.messages.transform_messages import UNKNOWN_STYLE
from textkit.utils.exceptions import UnknownStyleError

__all__ = [
    "tokenize",
    "convert_case",
    "to_camel_case",
    "to_kebab_case",
    "to_upper_kebab_case",
    "to_snake_case",
    "to_upper_snake_case",
    "capitalize",
    "upper_first",
    "lower_first",
    "pad",
    "pad_start",
    "pad_end",
    "before",
    "before_last",
    "after",
    "after_last",
    "wrap",
    "unwrap",
    "reverse",
    "is_string",
    "split_words",
    "word_count",
    "split_ex",
]


def tokenize(s: str) -> List[str]:
    """Letter and digit runs of `s`, other characters dropped."""
    return [t.text for t in default_tokenizer.tokenize(s)]


def convert_case(s: str, style: Union[str, JoinPolicy]) -> str:
    """Convert `s` with a registered style name or a custom ``JoinPolicy``."""
    if isinstance(style, JoinPolicy):
        policy = style
    else:
        policy = STYLE_POLICIES.get(str(style).lower().replace("-", "_"))
        if policy is None:
            raise UnknownStyleError(
                style=str(style),
                message=UNKNOWN_STYLE.format(
                    style=style, available=", ".join(sorted(STYLE_POLICIES))
                ),
            )
    return join_tokens(default_tokenizer.tokenize(s), policy)


def to_camel_case(s: str) -> str:
    return join_tokens(default_tokenizer.tokenize(s), CAMEL_CASE)


def to_kebab_case(s: str) -> str:
    return join_tokens(default_tokenizer.tokenize(s), KEBAB_CASE)


def to_upper_kebab_case(s: str) -> str:
    return join_tokens(default_tokenizer.tokenize(s), UPPER_KEBAB_CASE)


def to_snake_case(s: str) -> str:
    return join_tokens(default_tokenizer.tokenize(s), SNAKE_CASE)


def to_upper_snake_case(s: str) -> str:
    return join_tokens(default_tokenizer.tokenize(s), UPPER_SNAKE_CASE)


def pad(s: str, size: int, pattern: str = " ") -> str:
    """Pad both sides up to `size` code points; the odd unit goes right."""
    return apply_pad(PadSpec(size, pattern, PadPosition.BOTH), s)


def pad_start(s: str, size: int, pattern: str = " ") -> str:
    return apply_pad(PadSpec(size, pattern, PadPosition.START), s)


def pad_end(s: str, size: int, pattern: str = " ") -> str:
    return apply_pad(PadSpec(size, pattern, PadPosition.END), s)


def split_words(s: str) -> List[str]:
    return default_word_splitter.split(s)


def word_count(s: str) -> int:
    return default_word_splitter.count(s)
