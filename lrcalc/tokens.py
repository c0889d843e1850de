"""Token types produced by the lexer and consumed by the evaluator."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class OperatorKind(str, Enum):
    """Binary operators."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


@dataclass(frozen=True)
class Number:
    value: Decimal


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind


@dataclass(frozen=True)
class GroupOpen:
    # Set when a unary minus directly precedes the parenthesis: -(2+3)
    negated: bool = False


@dataclass(frozen=True)
class GroupClose:
    pass


Token = Union[Number, Operator, GroupOpen, GroupClose]
