"""Errors raised by the calculation pipeline."""
from enum import Enum
from typing import Optional


class LexErrorKind(str, Enum):
    UNRECOGNIZED_SYMBOL = "unrecognized_symbol"
    INVALID_NUMBER = "invalid_number"


class EvalErrorKind(str, Enum):
    EMPTY_EXPRESSION = "empty_expression"
    MALFORMED_EXPRESSION = "malformed_expression"
    UNBALANCED_GROUPS = "unbalanced_groups"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"


class GuardErrorKind(str, Enum):
    INPUT_REJECTED = "input_rejected"


class CalculationError(ValueError):
    """Base class for every failure the pipeline reports."""

    def __init__(self, kind, message: str, position: Optional[int] = None,
                 symbol: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position
        self.symbol = symbol

    def __eq__(self, other):
        if not isinstance(other, CalculationError):
            return NotImplemented
        return (type(self) is type(other)
                and (self.kind, self.position, self.symbol) == (other.kind, other.position, other.symbol))

    def __hash__(self):
        return hash((type(self), self.kind, self.position, self.symbol))

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.value}, position={self.position}, symbol={self.symbol!r})"


class LexError(CalculationError):
    """Raised while scanning the input text."""

    @classmethod
    def unrecognized_symbol(cls, symbol: str, position: int) -> "LexError":
        return cls(LexErrorKind.UNRECOGNIZED_SYMBOL,
                   f"Unrecognized symbol '{symbol}' at position {position}",
                   position=position, symbol=symbol)

    @classmethod
    def invalid_number(cls, literal: str, position: int) -> "LexError":
        return cls(LexErrorKind.INVALID_NUMBER,
                   f"Invalid number '{literal}' at position {position}",
                   position=position, symbol=literal)


class EvalError(CalculationError):
    """Raised while reducing a token sequence."""

    def __init__(self, kind: EvalErrorKind, message: Optional[str] = None):
        super().__init__(kind, message or _EVAL_MESSAGES[kind])


_EVAL_MESSAGES = {
    EvalErrorKind.EMPTY_EXPRESSION: "Empty expression",
    EvalErrorKind.MALFORMED_EXPRESSION: "Malformed expression",
    EvalErrorKind.UNBALANCED_GROUPS: "Unbalanced parentheses",
    EvalErrorKind.DIVISION_BY_ZERO: "Division by zero",
    EvalErrorKind.OVERFLOW: "Result out of allowed range",
}


class InputRejected(CalculationError):
    """Raised when an input guard refuses the expression."""

    def __init__(self, message: str):
        super().__init__(GuardErrorKind.INPUT_REJECTED, message)
