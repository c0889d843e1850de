"""Guards applied to expressions before they are evaluated."""
import logging
from typing import Optional, Sequence, Tuple

from lrcalc.config import MAX_EXPRESSION_LENGTH, MAX_NESTING_DEPTH
from lrcalc.tokens import GroupClose, GroupOpen, Token

logger = logging.getLogger(__name__)


def check_expression_length(
    expression: str,
    max_length: Optional[int] = None
) -> Tuple[bool, Optional[str]]:
    """
    Check that the expression is not longer than max_length characters.

    Args:
        expression: Raw expression text
        max_length: Longest accepted expression

    Returns:
        (is_valid, error_message) tuple
    """
    if max_length is None:
        max_length = MAX_EXPRESSION_LENGTH
    if len(expression) > max_length:
        error_msg = f"Expression too long: {len(expression)} characters (limit {max_length})"
        logger.warning(error_msg)
        return False, error_msg
    logger.debug(f"Expression length check passed: {len(expression)} characters")
    return True, None


def nesting_depth(tokens: Sequence[Token]) -> int:
    """Deepest group nesting in a token sequence. Unbalanced closes are ignored."""
    depth = 0
    deepest = 0
    for token in tokens:
        if isinstance(token, GroupOpen):
            depth += 1
            deepest = max(deepest, depth)
        elif isinstance(token, GroupClose) and depth > 0:
            depth -= 1
    return deepest


def check_nesting_depth(
    tokens: Sequence[Token],
    max_depth: Optional[int] = None
) -> Tuple[bool, Optional[str]]:
    """
    Check that groups are not nested deeper than max_depth.

    Rejects pathological input before any evaluation work is done.

    Args:
        tokens: Token sequence from the lexer
        max_depth: Deepest accepted nesting

    Returns:
        (is_valid, error_message) tuple
    """
    if max_depth is None:
        max_depth = MAX_NESTING_DEPTH
    depth = nesting_depth(tokens)
    if depth > max_depth:
        error_msg = f"Parentheses nested too deeply: {depth} levels (limit {max_depth})"
        logger.warning(error_msg)
        return False, error_msg
    logger.debug(f"Nesting depth check passed: {depth} levels")
    return True, None


def apply_guards(
    expression: str,
    tokens: Optional[Sequence[Token]] = None
) -> Tuple[bool, Optional[str]]:
    """
    Apply all guards to an expression.

    Args:
        expression: Raw expression text
        tokens: Token sequence, when the expression has already been lexed

    Returns:
        (passed, error_message) tuple
    """
    passed, error = check_expression_length(expression)
    if not passed:
        return False, error

    if tokens is not None:
        passed, error = check_nesting_depth(tokens)
        if not passed:
            return False, error

    logger.debug("All guard checks passed")
    return True, None
