"""Tests for input guards."""
import pytest
from lrcalc.guards.policy import (
    apply_guards,
    check_expression_length,
    check_nesting_depth,
    nesting_depth,
)
from lrcalc.lexer import tokenize


def test_check_expression_length_allowed():
    """Test that short expressions pass."""
    is_valid, error = check_expression_length("1+2", max_length=3)
    assert is_valid is True
    assert error is None


def test_check_expression_length_too_long():
    """Test that long expressions are rejected."""
    is_valid, error = check_expression_length("1+2+3", max_length=3)
    assert is_valid is False
    assert "Expression too long" in error
    assert "limit 3" in error


def test_nesting_depth():
    """Test nesting depth of token sequences."""
    assert nesting_depth(tokenize("1+2")) == 0
    assert nesting_depth(tokenize("(1)+(2)")) == 1
    assert nesting_depth(tokenize("((1+2)*3)-4")) == 2
    assert nesting_depth(tokenize("-(-(3))")) == 2


def test_nesting_depth_ignores_stray_close():
    """Test that an unmatched close does not make depth negative."""
    assert nesting_depth(tokenize(")(1)")) == 1


def test_check_nesting_depth_allowed():
    """Test that shallow nesting passes."""
    is_valid, error = check_nesting_depth(tokenize("((1))"), max_depth=2)
    assert is_valid is True
    assert error is None


def test_check_nesting_depth_too_deep():
    """Test that deep nesting is rejected."""
    is_valid, error = check_nesting_depth(tokenize("(((1)))"), max_depth=2)
    assert is_valid is False
    assert "nested too deeply: 3 levels" in error


def test_apply_guards_without_tokens():
    """Test that only the length guard runs before lexing."""
    passed, error = apply_guards("(" * 1000 + "1")
    assert passed is True
    assert error is None


def test_apply_guards_with_tokens():
    """Test that the nesting guard runs once tokens are available."""
    expression = "(" * 1000 + "1" + ")" * 1000
    passed, error = apply_guards(expression, tokenize(expression))
    assert passed is False
    assert "nested too deeply" in error


def test_apply_guards_all_pass():
    """Test that ordinary expressions pass every guard."""
    passed, error = apply_guards("2+(3*4)", tokenize("2+(3*4)"))
    assert passed is True
    assert error is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
