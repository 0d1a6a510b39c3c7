import pytest

from textkit.core.case_joining.config import JoinPolicy, TokenCase
from textkit.core.case_joining.joiner import join_tokens
from textkit.transforms import (
    convert_case,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_upper_kebab_case,
    to_upper_snake_case,
    tokenize,
)
from textkit.utils.exceptions import UnknownStyleError

SAMPLE = "Foo-#1😄$_%^&*(1bar"


def test_reference_sample():
    assert to_kebab_case(SAMPLE) == "foo-1-1-bar"
    assert to_camel_case(SAMPLE) == "foo11Bar"
    assert to_snake_case(SAMPLE) == "foo_1_1_bar"
    assert to_upper_kebab_case(SAMPLE) == "FOO-1-1-BAR"
    assert to_upper_snake_case(SAMPLE) == "FOO_1_1_BAR"


@pytest.mark.parametrize(
    "fn",
    [
        to_camel_case,
        to_kebab_case,
        to_upper_kebab_case,
        to_snake_case,
        to_upper_snake_case,
    ],
)
@pytest.mark.parametrize("text", ["", "   ", "$%^&*", "😄😄"])
def test_no_words_gives_empty_string(fn, text):
    assert fn(text) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "helloWorld"),
        ("HELLO WORLD", "helloWorld"),
        ("  leading space", "leadingSpace"),
        ("2nd place", "2NdPlace"),
        ("\u00fcber stra\u00dfe", "\u00fcberStra\u00dfe"),
        ("\u00c9COLE normale", "\u00e9coleNormale"),
        ("FooBar baz", "foobarBaz"),
    ],
)
def test_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", "hello-world"),
        ("hello_world", "hello-world"),
        ("Привет мир", "привет-мир"),
        ("version2beta", "version-2-beta"),
        ("FooBar", "foobar"),
    ],
)
def test_kebab_case(text, expected):
    assert to_kebab_case(text) == expected


@pytest.mark.parametrize(
    "text",
    [SAMPLE, "Hello World", "XMLHttpRequest v2", "snake_CASE-Mixed 99 Bottles"],
)
def test_style_families_share_tokens(text):
    assert tokenize(to_kebab_case(text)) == tokenize(to_snake_case(text))
    assert to_kebab_case(text).replace("-", "_") == to_snake_case(text)
    assert to_upper_kebab_case(text) == to_kebab_case(text).upper()


@pytest.mark.parametrize("text", [SAMPLE, "Hello World", "ABC def", "9 Lives"])
def test_lower_styles_have_no_upper_case(text):
    assert to_kebab_case(text) == to_kebab_case(text).lower()
    assert to_snake_case(text) == to_snake_case(text).lower()
    first = to_camel_case(text)[0]
    assert first.islower() or first.isdigit()


def test_join_tokens_applies_rules_by_position():
    policy = JoinPolicy(".", TokenCase.UPPER, TokenCase.NONE)
    assert join_tokens(["ab", "Cd", "eF"], policy) == "AB.Cd.eF"
    assert join_tokens([], policy) == ""
    assert join_tokens(["only"], policy) == "ONLY"


def test_convert_case_by_name():
    assert convert_case("Foo Bar", "kebab") == "foo-bar"
    assert convert_case("Foo Bar", "upper-kebab") == "FOO-BAR"
    assert convert_case("Foo Bar", "UPPER_SNAKE") == "FOO_BAR"


def test_convert_case_with_custom_policy():
    pascal = JoinPolicy("", "capitalize", "capitalize")
    assert convert_case("foo bar-baz", pascal) == "FooBarBaz"


def test_convert_case_unknown_style():
    with pytest.raises(UnknownStyleError) as exc:
        convert_case("foo", "pascal")
    assert exc.value.code == "UNKNOWN_STYLE"
    assert "camel" in exc.value.message


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\u0130stanbul", "istanbul"),  # dotted capital I lowers to plain i
        ("stra\u00dfe", "stra\u00dfe"),
    ],
)
def test_kebab_case_keeps_one_code_point_per_letter(text, expected):
    out = to_kebab_case(text)
    assert out == expected
    assert len(out) == len(text)
    assert tokenize(out) == [expected]


def test_upper_case_keeps_sharp_s():
    assert to_upper_snake_case("stra\u00dfe 1") == "STRA\u00dfE_1"
    assert to_upper_kebab_case("\ufb01le") == "\ufb01LE"  # ligature has no single upper form
