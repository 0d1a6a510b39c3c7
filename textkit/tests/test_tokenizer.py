import unicodedata

import pytest

from textkit.core.classification.base import CharacterClass
from textkit.core.classification.classifier import UnicodeCharacterClassifier
from textkit.core.tokenization.config import TokenizationConfig
from textkit.core.tokenization.tokenizer import CharacterClassTokenizer
from textkit.transforms import tokenize


def _letters_and_digits(s: str) -> str:
    return "".join(
        ch
        for ch in s
        if unicodedata.category(ch)[0] == "L" or unicodedata.category(ch) == "Nd"
    )


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("a", CharacterClass.LETTER),
        ("Ж", CharacterClass.LETTER),
        ("語", CharacterClass.LETTER),
        ("7", CharacterClass.DIGIT),
        ("١", CharacterClass.DIGIT),  # ARABIC-INDIC DIGIT ONE
        ("²", CharacterClass.OTHER),  # superscript is No, not Nd
        ("😄", CharacterClass.OTHER),
        ("_", CharacterClass.OTHER),
        (" ", CharacterClass.OTHER),
        ("ab", CharacterClass.OTHER),
    ],
)
def test_classify(ch, expected):
    assert UnicodeCharacterClassifier().classify(ch) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1bar", ["1", "bar"]),
        ("bar1", ["bar", "1"]),
        ("Foo-#1😄$_%^&*(1bar", ["Foo", "1", "1", "bar"]),
        ("don't-stop", ["don", "t", "stop"]),
        ("你好 世界", ["你好", "世界"]),
        ("Привет, мир!", ["Привет", "мир"]),
        ("١٢٣abc", ["١٢٣", "abc"]),
        ("x²y", ["x", "y"]),
        ("  --lead and trail--  ", ["lead", "and", "trail"]),
        ("", []),
        ("!@# $%^ 😄", []),
    ],
)
def test_tokenize(text, expected):
    assert tokenize(text) == expected


def test_case_change_does_not_split_a_run():
    assert tokenize("FooBar") == ["FooBar"]
    assert tokenize("HTTPServer2Go") == ["HTTPServer", "2", "Go"]


@pytest.mark.parametrize(
    "text",
    [
        "Foo-#1😄$_%^&*(1bar",
        "hello_world 42 times",
        "日本語テキスト123と😄emoji",
        "ΑΒΓ δεζ--0099",
        "\t\n mixed whitespace here ",
    ],
)
def test_tokens_concatenate_to_letters_and_digits(text):
    assert "".join(tokenize(text)) == _letters_and_digits(text)


def test_tokens_record_their_class():
    tokens = CharacterClassTokenizer().tokenize("abc123")
    assert [(t.text, t.char_class) for t in tokens] == [
        ("abc", CharacterClass.LETTER),
        ("123", CharacterClass.DIGIT),
    ]
    assert str(tokens[0]) == "abc"


def test_tokenizer_config_drops_digits():
    tok = CharacterClassTokenizer(TokenizationConfig(keep_digits=False))
    assert [t.text for t in tok.tokenize("abc123def 9")] == ["abc", "def"]


def test_tokenizer_config_merges_class_changes():
    tok = CharacterClassTokenizer(TokenizationConfig(split_on_class_change=False))
    tokens = tok.tokenize("abc123def ghi")
    assert [t.text for t in tokens] == ["abc123def", "ghi"]
    assert tokens[0].char_class is CharacterClass.LETTER
