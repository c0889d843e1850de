"""Configuration management for the calculator."""
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# "symbols" for + - * / ( ), "letters" for the a-f opcode alphabet
OPERATOR_ALPHABET = os.getenv("OPERATOR_ALPHABET", "symbols")

MAX_MAGNITUDE = Decimal(os.getenv("MAX_MAGNITUDE", str(2 ** 63 - 1)))
DECIMAL_PRECISION = int(os.getenv("DECIMAL_PRECISION", "28"))

MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", "10000"))
MAX_NESTING_DEPTH = int(os.getenv("MAX_NESTING_DEPTH", "200"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SHOW_TRACE = os.getenv("SHOW_TRACE", "false").lower() in ("1", "true", "yes")
# Oldest trace records are dropped past this many
MAX_TRACE_RECORDS = int(os.getenv("MAX_TRACE_RECORDS", "500"))
