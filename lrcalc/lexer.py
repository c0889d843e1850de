"""Lexer: turns expression text into an immutable sequence of tokens."""
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Tuple

from lrcalc.errors import LexError
from lrcalc.tokens import GroupClose, GroupOpen, Number, Operator, OperatorKind, Token

DIGITS = "0123456789"
_NUMBER_CHARS = DIGITS + "."
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


@dataclass(frozen=True)
class Alphabet:
    """Characters that stand for operators and grouping symbols."""
    name: str
    operators: Dict[str, OperatorKind]
    group_open: str
    group_close: str

    @property
    def minus(self) -> str:
        for char, kind in self.operators.items():
            if kind is OperatorKind.SUBTRACT:
                return char
        raise ValueError(f"Alphabet '{self.name}' has no subtraction symbol")


SYMBOLS = Alphabet(
    name="symbols",
    operators={
        "+": OperatorKind.ADD,
        "-": OperatorKind.SUBTRACT,
        "*": OperatorKind.MULTIPLY,
        "/": OperatorKind.DIVIDE,
    },
    group_open="(",
    group_close=")",
)

# Opcode letters: "3a2c4" reads as 3 + 2 * 4
LETTERS = Alphabet(
    name="letters",
    operators={
        "a": OperatorKind.ADD,
        "b": OperatorKind.SUBTRACT,
        "c": OperatorKind.MULTIPLY,
        "d": OperatorKind.DIVIDE,
    },
    group_open="e",
    group_close="f",
)

ALPHABETS = {alphabet.name: alphabet for alphabet in (SYMBOLS, LETTERS)}


def get_alphabet(name: str) -> Alphabet:
    """Look up an alphabet by name ('symbols' or 'letters')."""
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown operator alphabet '{name}', expected one of: {', '.join(ALPHABETS)}")


def _scan_number(expression: str, start: int) -> int:
    """Return the index just past the digit/decimal-point run starting at start."""
    end = start
    while end < len(expression) and expression[end] in _NUMBER_CHARS:
        end += 1
    return end


def _parse_number(literal: str, position: int, negative: bool = False) -> Number:
    if not _NUMBER_RE.fullmatch(literal):
        raise LexError.invalid_number(literal, position)
    # Built from text so the literal is exact regardless of decimal context
    return Number(Decimal("-" + literal if negative else literal))


def _expects_operand(tokens: List[Token]) -> bool:
    """True where a '-' would start a signed operand instead of subtracting."""
    return not tokens or isinstance(tokens[-1], (Operator, GroupOpen))


def tokenize(expression: str, alphabet: Alphabet = SYMBOLS) -> Tuple[Token, ...]:
    """
    Split an expression into number, operator and grouping tokens.

    Whitespace is skipped. A minus sign at the start of the expression, or
    right after an operator or an opening parenthesis, that is immediately
    followed by a digit or an opening parenthesis is a sign, not subtraction.

    Args:
        expression: Text to scan
        alphabet: Operator and grouping characters to recognize

    Returns:
        Tuple of tokens

    Raises:
        LexError: unrecognized character or malformed numeric literal
    """
    tokens: List[Token] = []
    pos = 0
    length = len(expression)

    while pos < length:
        char = expression[pos]

        if char.isspace():
            pos += 1
            continue

        if char in _NUMBER_CHARS:
            end = _scan_number(expression, pos)
            tokens.append(_parse_number(expression[pos:end], pos))
            pos = end
            continue

        if char == alphabet.minus and _expects_operand(tokens) and pos + 1 < length:
            following = expression[pos + 1]
            if following in DIGITS:
                end = _scan_number(expression, pos + 1)
                tokens.append(_parse_number(
                    expression[pos + 1:end], pos + 1, negative=True))
                pos = end
                continue
            if following == alphabet.group_open:
                tokens.append(GroupOpen(negated=True))
                pos += 2
                continue

        if char in alphabet.operators:
            tokens.append(Operator(alphabet.operators[char]))
        elif char == alphabet.group_open:
            tokens.append(GroupOpen())
        elif char == alphabet.group_close:
            tokens.append(GroupClose())
        else:
            raise LexError.unrecognized_symbol(char, pos)
        pos += 1

    return tuple(tokens)
