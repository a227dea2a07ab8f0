"""Tests for attribute literal type inference and key casing."""

import pytest

from litmus.inference import infer, to_pascal_case
from litmus.models import UNKNOWN_ENUM_TYPE, InferredValue, ValueKind


# --- Precedence (6 tests) ---

@pytest.mark.parametrize("raw, literal", [("true", "true"), ("FALSE", "false"), ("True", "true")])
def test_boolean(raw, literal):
    assert infer(raw) == InferredValue(ValueKind.BOOLEAN, literal, "bool")


def test_enum_like():
    assert infer("Color.Red") == InferredValue(ValueKind.ENUM_LIKE, "Color.Red", "Color")


def test_enum_like_takes_first_segment():
    assert infer("Size.Large.Wide").type_name == "Size"


def test_integer():
    assert infer("42") == InferredValue(ValueKind.INTEGER, "42", "int")
    assert infer("-7").kind is ValueKind.INTEGER


def test_string_default():
    assert infer("hello") == InferredValue(ValueKind.STRING, '"hello"', "string")


@pytest.mark.parametrize("raw", ["4.5", "color.Red", "1_000", "0x1F", ""])
def test_non_matching_values_fall_back_to_string(raw):
    assert infer(raw).kind is ValueKind.STRING


# --- Edge cases (4 tests) ---

def test_unresolvable_enum_prefix_uses_placeholder():
    value = infer("Foo-Bar.Baz")
    assert value.kind is ValueKind.ENUM_LIKE
    assert value.type_name == UNKNOWN_ENUM_TYPE
    assert not value.is_resolved


def test_string_literal_is_escaped():
    assert infer('say "hi" \\o/').literal == '"say \\"hi\\" \\\\o/"'


def test_empty_value_is_empty_string_literal():
    assert infer("").literal == '""'


def test_multiline_string_literal_stays_on_one_line():
    assert infer("a\n   b\tc\r").literal == '"a\\n   b\\tc\\r"'


# --- Integer range (2 tests) ---

def test_integer_whitespace_trimmed():
    assert infer(" 42 ") == InferredValue(ValueKind.INTEGER, "42", "int")


@pytest.mark.parametrize("raw, kind", [
    ("2147483647", ValueKind.INTEGER),
    ("-2147483648", ValueKind.INTEGER),
    ("2147483648", ValueKind.STRING),
    ("99999999999", ValueKind.STRING),
])
def test_integer_limited_to_int_range(raw, kind):
    assert infer(raw).kind is kind


# --- PascalCase (2 tests) ---

@pytest.mark.parametrize(
    "key, expected",
    [
        ("data-id", "DataId"),
        ("aria_label", "AriaLabel"),
        ("text", "Text"),
        ("bind-Value", "BindValue"),
        ("a--b", "AB"),
    ],
)
def test_to_pascal_case(key, expected):
    assert to_pascal_case(key) == expected


def test_to_pascal_case_empty():
    assert to_pascal_case("") == ""
