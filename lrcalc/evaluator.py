"""Evaluator: reduces a token sequence to one value, strictly left to right.

Parenthesized spans are evaluated first, innermost first, and their value
replaces the whole span. What remains is a flat run of numbers and operators
that is folded into an accumulator in sequence order, with no operator
precedence: "2 + 3 * 4" is 20.

Open groups are kept on an explicit stack of scopes; nesting depth is
bounded only by input length.
"""
import operator
from decimal import Decimal, localcontext
from typing import List, Optional, Sequence, Tuple

from lrcalc.errors import EvalError, EvalErrorKind
from lrcalc.tokens import GroupClose, GroupOpen, Number, Operator, OperatorKind, Token

DEFAULT_MAX_MAGNITUDE = Decimal(2 ** 63 - 1)
DEFAULT_PRECISION = 28

_OPERATIONS = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUBTRACT: operator.sub,
    OperatorKind.MULTIPLY: operator.mul,
    OperatorKind.DIVIDE: operator.truediv,
}


def evaluate(
    tokens: Sequence[Token],
    max_magnitude: Decimal = DEFAULT_MAX_MAGNITUDE,
    precision: int = DEFAULT_PRECISION,
) -> Decimal:
    """
    Evaluate a token sequence produced by the lexer.

    Args:
        tokens: Token sequence
        max_magnitude: Largest absolute value an operand or result may take
        precision: Significant digits used for decimal arithmetic

    Returns:
        The value of the expression

    Raises:
        EvalError: empty, malformed or unbalanced input, division by zero,
            or a value outside +/- max_magnitude
    """
    with localcontext() as ctx:
        ctx.prec = precision
        return _evaluate_scopes(tokens, max_magnitude)


def _evaluate_scopes(tokens: Sequence[Token], max_magnitude: Decimal) -> Decimal:
    """Collapse each group into a Number when its close is reached, then reduce the top level."""
    # Each scope is the opening token (None for the top level) and its flat tokens so far
    scopes: List[Tuple[Optional[GroupOpen], List[Token]]] = [(None, [])]

    for token in tokens:
        if isinstance(token, GroupOpen):
            scopes.append((token, []))
        elif isinstance(token, GroupClose):
            if len(scopes) == 1:
                raise EvalError(EvalErrorKind.UNBALANCED_GROUPS)
            opener, flat = scopes.pop()
            value = _reduce(flat, max_magnitude)
            scopes[-1][1].append(Number(-value if opener.negated else value))
        else:
            scopes[-1][1].append(token)

    if len(scopes) > 1:
        raise EvalError(EvalErrorKind.UNBALANCED_GROUPS)
    return _reduce(scopes[0][1], max_magnitude)


def _reduce(flat: List[Token], max_magnitude: Decimal) -> Decimal:
    """Fold a flat Number (Operator Number)* sequence left to right."""
    if not flat:
        raise EvalError(EvalErrorKind.EMPTY_EXPRESSION)
    first = flat[0]
    if not isinstance(first, Number):
        raise EvalError(EvalErrorKind.MALFORMED_EXPRESSION,
                        "Malformed expression: expected a number first")
    accumulator = _check_range(first.value, max_magnitude)

    index = 1
    while index < len(flat):
        op = flat[index]
        if not isinstance(op, Operator):
            raise EvalError(EvalErrorKind.MALFORMED_EXPRESSION,
                            "Malformed expression: missing operator between numbers")
        if index + 1 == len(flat):
            raise EvalError(EvalErrorKind.MALFORMED_EXPRESSION,
                            "Malformed expression: trailing operator")
        operand = flat[index + 1]
        if not isinstance(operand, Number):
            raise EvalError(EvalErrorKind.MALFORMED_EXPRESSION,
                            "Malformed expression: consecutive operators")
        accumulator = _apply(op.kind, accumulator,
                             _check_range(operand.value, max_magnitude), max_magnitude)
        index += 2

    return accumulator


def _apply(kind: OperatorKind, left: Decimal, right: Decimal, max_magnitude: Decimal) -> Decimal:
    if kind is OperatorKind.DIVIDE and right == 0:
        raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
    return _check_range(_OPERATIONS[kind](left, right), max_magnitude)


def _check_range(value: Decimal, max_magnitude: Decimal) -> Decimal:
    if abs(value) > max_magnitude:
        raise EvalError(EvalErrorKind.OVERFLOW)
    return value
