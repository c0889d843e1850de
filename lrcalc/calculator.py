# lrcalc/calculator.py

import logging
import time
from decimal import Decimal

from lrcalc.config import DECIMAL_PRECISION, MAX_MAGNITUDE, OPERATOR_ALPHABET
from lrcalc.errors import CalculationError, InputRejected
from lrcalc.evaluator import evaluate
from lrcalc.guards.policy import apply_guards, check_nesting_depth
from lrcalc.lexer import get_alphabet, tokenize
from lrcalc.observability.telemetry import clear_trace, log_error, log_stage

logger = logging.getLogger(__name__)


def _run_stage(stage: str, expression: str, func, *args, describe=str, metadata=None, **kwargs):
    """Run one pipeline stage, recording its timing or its failure."""
    start = time.perf_counter()
    try:
        result = func(*args, **kwargs)
    except CalculationError as e:
        log_error(stage, expression, e.kind.value, e.message, e.position)
        raise
    duration_ms = (time.perf_counter() - start) * 1000
    log_stage(stage, expression, describe(result), duration_ms, metadata)
    return result


def _raise_if_rejected(check):
    passed, error = check
    if not passed:
        raise InputRejected(error)
    return "passed"


def calculate(expr: str) -> Decimal:
    """
    Evaluate an arithmetic expression strictly left to right.
    Supports +, -, *, / and parentheses; there is no operator precedence.
    Examples:
        >>> calculate("2 + 3 * 4")
        Decimal('20')
        >>> calculate("2 + (3 * 4)")
        Decimal('14')
    """
    alphabet = get_alphabet(OPERATOR_ALPHABET)
    _run_stage("guard", expr, lambda: _raise_if_rejected(apply_guards(expr)))
    tokens = _run_stage("lex", expr, tokenize, expr, alphabet,
                        describe=lambda t: f"{len(t)} tokens",
                        metadata={"alphabet": alphabet.name})
    _run_stage("nesting", expr, lambda: _raise_if_rejected(check_nesting_depth(tokens)))
    return _run_stage("evaluate", expr, evaluate, tokens,
                      max_magnitude=MAX_MAGNITUDE, precision=DECIMAL_PRECISION,
                      describe=format_result,
                      metadata={"precision": DECIMAL_PRECISION, "max_magnitude": str(MAX_MAGNITUDE)})


def format_result(value: Decimal) -> str:
    """Render a result as a plain decimal string: 20, -2, 3.75."""
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def run_repl():
    """Read expressions until 'q' or end of input, printing each result."""
    while True:
        clear_trace()  # Each expression starts a fresh trace
        try:
            expr = input("Enter expression (or 'q' to quit): ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if expr.strip().lower() == "q":
            break
        try:
            print("=", format_result(calculate(expr)))
        except ValueError as err:
            print("Error:", err)


if __name__ == "__main__":
    run_repl()
