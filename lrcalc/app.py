"""CLI interface for the calculator."""
import sys
from importlib.metadata import PackageNotFoundError, version

from lrcalc.calculator import calculate, format_result
from lrcalc.config import LOG_LEVEL, OPERATOR_ALPHABET, SHOW_TRACE
from lrcalc.errors import CalculationError
from lrcalc.lexer import get_alphabet
from lrcalc.observability.telemetry import format_trace_summary, clear_trace
from lrcalc.observability.logging_config import configure_logging


def _version() -> str:
    try:
        return version("lrcalc")
    except PackageNotFoundError:
        return "unknown"


def main():
    configure_logging(LOG_LEVEL)

    if len(sys.argv) < 2:
        print(f"lrcalc {_version()} - Usage: lrcalc '<expression>'")
        sys.exit(1)

    try:
        get_alphabet(OPERATOR_ALPHABET)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    expression = " ".join(sys.argv[1:])
    clear_trace()  # Clear trace for fresh run

    try:
        result = calculate(expression)
    except CalculationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    finally:
        if SHOW_TRACE:
            print(format_trace_summary(), file=sys.stderr)

    print(format_result(result))


if __name__ == "__main__":
    main()
