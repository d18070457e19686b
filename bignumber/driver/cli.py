"""
Command-line driver.

Читает два десятичных значения (из аргументов или первые два токена stdin)
и печатает отчёт:

    a + b = ...
    a - b = ...
    a * b = ...
    a / b = ...   (только при b != 0)
    a % b = ...   (только при b != 0)
    a & b = ...
    a | b = ...

Коды возврата: 0 при успехе, 1 при делении на ноль с --strict-division,
2 при некорректном или отсутствующем вводе.
"""

import argparse
import json
import sys
from typing import Optional, Sequence, TextIO

from bignumber import __version__
from bignumber.core.domain import DivisionByZero, InvalidFormat, parse
from bignumber.driver.report import DriverConfig, build_report
from bignumber.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


class InputError(Exception):
    """Недостаточно входных значений."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignumber",
        description="Arbitrary-precision integer calculator: prints a+b, a-b, a*b, a/b, a%b, a&b, a|b.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="two decimal integers; read from stdin when omitted",
    )
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--strict-division",
        action="store_true",
        help="fail on a zero divisor instead of omitting a / b and a %% b",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_operands(values: Sequence[str], stdin: TextIO) -> tuple[str, str]:
    """
    Два текстовых операнда: из аргументов или первые два токена stdin.

    Raises:
        InputError: Если значений меньше двух или больше двух аргументов
    """
    if values:
        if len(values) != 2:
            raise InputError(f"expected exactly two values, got {len(values)}")
        return values[0], values[1]

    tokens = stdin.read().split()
    if len(tokens) < 2:
        raise InputError(f"expected two values on stdin, got {len(tokens)}")
    return tokens[0], tokens[1]


def run(
    config: DriverConfig,
    text_a: str,
    text_b: str,
    stdout: TextIO,
) -> None:
    """
    Разбор операндов и печать отчёта.

    Raises:
        InvalidFormat: Если операнд не является десятичным целым
    """
    a = parse(text_a)
    b = parse(text_b)
    logger.debug("Parsed operands: a has %d words, b has %d words", a.word_count, b.word_count)

    report = build_report(a, b, config)

    if config.json_output:
        stdout.write(json.dumps(report.to_json_dict(), indent=2) + "\n")
    else:
        for line in report.to_lines():
            stdout.write(line + "\n")


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    config = DriverConfig(
        json_output=args.json,
        log_level=args.log_level,
        skip_division_on_zero=not args.strict_division,
    )
    setup_logging(config.log_level, stream=stderr)

    try:
        text_a, text_b = read_operands(args.values, stdin)
        run(config, text_a, text_b, stdout)
    except (InputError, InvalidFormat) as e:
        logger.info("Rejected input: %s", e)
        stderr.write(f"error: {e}\n")
        return EXIT_USAGE
    except DivisionByZero as e:
        logger.info("Division failed: %s", e)
        stderr.write(f"error: {e}\n")
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
