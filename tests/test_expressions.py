import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expressions import (
    brackets_balanced,
    infix_to_postfix,
    is_operator,
    parentheses_balanced,
    precedence,
)


@pytest.mark.parametrize("ch", ["*", "/"])
def test_multiplicative_precedence(ch):
    assert precedence(ch) == 3


@pytest.mark.parametrize("ch", ["+", "-"])
def test_additive_precedence(ch):
    assert precedence(ch) == 2


@pytest.mark.parametrize("ch", ["a", "6", "(", ""])
def test_non_operators(ch):
    assert precedence(ch) == 0
    assert not is_operator(ch)


@pytest.mark.parametrize("ch", ["+", "-", "*", "/"])
def test_operators(ch):
    assert is_operator(ch)


def test_source_example():
    assert infix_to_postfix("a-b+t/6") == "ab-t6/+"


def test_higher_precedence_binds_first():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_empty_expression():
    assert infix_to_postfix("") == ""


@given(st.text(alphabet="abcxyz0123456789"))
def test_operands_only_unchanged(text):
    assert infix_to_postfix(text) == text


@given(st.lists(st.sampled_from("+-*/"), max_size=10), st.data())
def test_postfix_keeps_operands_in_order(ops, data):
    operands = data.draw(st.lists(st.sampled_from("abcd"), min_size=len(ops) + 1, max_size=len(ops) + 1))
    infix = operands[0] + "".join(op + operand for op, operand in zip(ops, operands[1:]))
    postfix = infix_to_postfix(infix)
    assert len(postfix) == len(infix)
    assert sorted(postfix) == sorted(infix)
    assert [ch for ch in postfix if not is_operator(ch)] == operands


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{1*[4+(14-5)]}", True),
        ("1*4+(14-5)", True),
        ("(]", False),
        ("{[}]", False),
        ("[[", False),
        ("]", False),
        ("", True),
    ],
)
def test_brackets_balanced(expression, expected):
    assert brackets_balanced(expression) is expected


@given(st.text(alphabet="()ab"))
def test_checks_agree_on_round_brackets(expression):
    assert brackets_balanced(expression) == parentheses_balanced(expression)