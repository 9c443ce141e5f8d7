import pytest

from infixcalc.infix import (
    convert_to_postfix,
    has_higher_priority,
    has_left_associative,
    tokenize,
)
from infixcalc.postfix import DivisionByZeroError, evaluate_postfix


def test_tokenize_splits_numbers_and_operators():
    assert list(tokenize("12+34")) == ["12", "+", "34"]


@pytest.mark.parametrize("op", ["<=", ">=", "!=", "==", "&&", "||"])
def test_tokenize_two_character_operators(op):
    assert list(tokenize(f"1{op}2")) == ["1", op, "2"]


def test_tokenize_single_character_operators():
    assert list(tokenize("(1<2)")) == ["(", "1", "<", "2", ")"]


def test_tokenize_skips_whitespace():
    assert list(tokenize("1 + 2")) == list(tokenize("1+2"))


@pytest.mark.parametrize("op", ["!", "^"])
def test_right_associative_operators(op):
    assert has_left_associative(op) is False


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%", "<", "==", "&&", "||"])
def test_left_associative_operators(op):
    assert has_left_associative(op) is True


def test_priority_ordering():
    assert has_higher_priority("*", "+") is True
    assert has_higher_priority("+", "*") is False
    assert has_higher_priority("+", "-") is False
    assert has_higher_priority("&&", "||") is True
    assert has_higher_priority("||", "(") is True


def test_simple_conversion():
    assert convert_to_postfix("1+2") == "1 2 +"


def test_parentheses_conversion():
    assert convert_to_postfix("(1+2)*3").split() == ["1", "2", "+", "3", "*"]


def test_right_associative_power_conversion():
    assert convert_to_postfix("2^3^2") == "2 3 2 ^ ^"


def test_trailing_number_keeps_separator():
    assert convert_to_postfix("42").rstrip(" ") == "42"
    assert convert_to_postfix("42").endswith(" ")


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2+3*4", 2 + 3 * 4),
        ("10-4-3", 10 - 4 - 3),
        ("12*34", 12 * 34),
        ("(2+3)*(4+5)", (2 + 3) * (4 + 5)),
        ("2^3^2", 2 ** 3 ** 2),
        ("100/10/5", 100 // 10 // 5),
        ("17%5", 17 % 5),
        ("3<=4", int(3 <= 4)),
        ("5>7", int(5 > 7)),
        ("2==2", int(2 == 2)),
        ("2!=2", int(2 != 2)),
        ("!0&&1", int((not 0) and 1)),
        ("0||0", int(0 or 0)),
        ("1+2<2*2", int(1 + 2 < 2 * 2)),
    ],
)
def test_round_trip_evaluation(expr, expected):
    assert evaluate_postfix(convert_to_postfix(expr)) == expected


def test_division_by_zero_through_conversion():
    with pytest.raises(DivisionByZeroError):
        evaluate_postfix(convert_to_postfix("5/0"))


@pytest.mark.parametrize("expr", ["(1+2", "1+2)", ")"])
def test_unbalanced_parentheses(expr):
    with pytest.raises(ValueError):
        convert_to_postfix(expr)