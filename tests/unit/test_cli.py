"""
Тесты command-line драйвера

Проверяет:
1. Чтение операндов из аргументов и из stdin
2. Формат вывода и пропуск / и % при нулевом делителе
3. JSON-вывод
4. Коды возврата и сообщения об ошибках
"""

import io
import json

import pytest

from bignumber.driver.cli import (
    EXIT_ERROR,
    EXIT_OK,
    EXIT_USAGE,
    InputError,
    main,
    read_operands,
)


def run_cli(argv: list[str], stdin_text: str = "") -> tuple[int, str, str]:
    stdin = io.StringIO(stdin_text)
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = main(argv, stdin=stdin, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


class TestReadOperands:
    """Тесты read_operands"""

    def test_from_arguments(self) -> None:
        """Два позиционных аргумента"""
        assert read_operands(["1", "-2"], io.StringIO("")) == ("1", "-2")

    def test_from_stdin_tokens(self) -> None:
        """Первые два токена stdin, разделители: любые пробелы"""
        assert read_operands([], io.StringIO("  12\n\t-34  56\n")) == ("12", "-34")

    def test_missing_values(self) -> None:
        """Меньше двух значений"""
        with pytest.raises(InputError, match="two values"):
            read_operands([], io.StringIO("5"))
        with pytest.raises(InputError, match="exactly two values"):
            read_operands(["5"], io.StringIO(""))


class TestMain:
    """Тесты main"""

    def test_stdin_report(self) -> None:
        """Вывод из stdin в фиксированном порядке"""
        code, out, err = run_cli([], "-5 3\n")
        assert code == EXIT_OK
        assert out.splitlines() == [
            "a + b = -2",
            "a - b = -8",
            "a * b = -15",
            "a / b = -1",
            "a % b = -2",
            "a & b = 1",
            "a | b = 7",
        ]
        assert err == ""

    def test_argument_report(self) -> None:
        """Отрицательные значения как позиционные аргументы"""
        code, out, _ = run_cli(["-7", "-2"])
        assert code == EXIT_OK
        assert "a / b = 3" in out.splitlines()
        assert "a % b = -1" in out.splitlines()

    def test_zero_divisor_omits_division(self) -> None:
        """b = 0: строки / и % не печатаются, остальные печатаются"""
        code, out, _ = run_cli([], "100 0")
        assert code == EXIT_OK
        assert out.splitlines() == [
            "a + b = 100",
            "a - b = 100",
            "a * b = 0",
            "a & b = 0",
            "a | b = 100",
        ]

    def test_negative_with_zero_divisor(self) -> None:
        """-100 0: сложение и вычитание с нулём, строки / и % пропущены"""
        code, out, err = run_cli(["-100", "0"])
        assert code == EXIT_OK
        assert out.splitlines() == [
            "a + b = -100",
            "a - b = -100",
            "a * b = 0",
            "a & b = 0",
            "a | b = 100",
        ]
        assert err == ""

    def test_strict_division_zero_divisor(self) -> None:
        """--strict-division: нулевой делитель → код 1 и сообщение на stderr"""
        code, out, err = run_cli(["--strict-division", "7", "0"])
        assert code == EXIT_ERROR
        assert out == ""
        assert err.startswith("error: ")

    def test_strict_division_nonzero_divisor(self) -> None:
        """--strict-division не меняет отчёт при ненулевом делителе"""
        code, out, _ = run_cli(["--strict-division", "7", "2"])
        assert code == EXIT_OK
        assert "a / b = 3" in out.splitlines()
        assert "a % b = 1" in out.splitlines()

    def test_json_output(self) -> None:
        """--json печатает объект отчёта"""
        code, out, _ = run_cli(["--json", "0", "12345"])
        assert code == EXIT_OK
        data = json.loads(out)
        assert data["a"] == "0"
        assert data["b"] == "12345"
        values = {item["operation"]: item["value"] for item in data["results"]}
        assert values == {
            "add": "12345",
            "subtract": "-12345",
            "multiply": "0",
            "divide": "0",
            "remainder": "0",
            "and": "0",
            "or": "12345",
        }

    def test_invalid_format_exit_code(self) -> None:
        """Некорректная запись → код 2 и сообщение на stderr"""
        code, out, err = run_cli(["12x", "3"])
        assert code == EXIT_USAGE
        assert out == ""
        assert err.startswith("error: ")
        assert "12x" in err

    def test_missing_input_exit_code(self) -> None:
        """Пустой stdin → код 2"""
        code, out, err = run_cli([], "")
        assert code == EXIT_USAGE
        assert out == ""
        assert "expected two values" in err

    def test_debug_logging_to_stderr(self) -> None:
        """--log-level DEBUG пишет диагностику в stderr, stdout не меняется"""
        code, out, err = run_cli(["--log-level", "DEBUG", "1", "0"])
        assert code == EXIT_OK
        assert "Parsed operands" in err
        assert "Skipping a / b" in err
        assert "a / b" not in out
