"""
Arithmetic Report: результаты операций над двумя операндами

Отчёт строится фиксированной цепочкой шагов:
- a + b, a - b, a * b (всегда)
- a / b, a % b (только при b != 0; иначе шаги пропускаются)
- a & b, a | b (всегда)

Каждый шаг даёт ReportLine; отчёт: immutable Pydantic модель, которая
сериализуется в текст ("a + b = ...") или в JSON по контракту
arithmetic_report.json.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

from bignumber.core.contracts import validate_arithmetic_report
from bignumber.core.domain import BigNumber
from bignumber.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция отчёта"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    REMAINDER = "remainder"
    AND = "and"
    OR = "or"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DriverConfig:
    """Конфигурация драйвера.

    - json_output: печатать отчёт как JSON вместо строк "a + b = ..."
    - log_level: уровень логирования драйвера
    - skip_division_on_zero: пропускать a / b и a % b при b == 0
      (иначе деление выполняется и DivisionByZero пробрасывается)
    """
    json_output: bool = False
    log_level: str = "WARNING"
    skip_division_on_zero: bool = True


# =============================================================================
# MODELS
# =============================================================================


class ReportLine(BaseModel):
    """Результат одной операции."""

    operation: Operation = Field(..., description="Операция")
    label: str = Field(..., min_length=1, description="Подпись, например 'a + b'")
    value: BigNumber = Field(..., description="Результат")

    model_config = {"frozen": True}

    def to_text(self) -> str:
        return f"{self.label} = {self.value}"

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation.value,
            "label": self.label,
            "value": str(self.value),
        }


class ArithmeticReport(BaseModel):
    """Отчёт по двум операндам."""

    a: BigNumber = Field(..., description="Первый операнд")
    b: BigNumber = Field(..., description="Второй операнд")
    results: tuple[ReportLine, ...] = Field(..., description="Результаты в порядке вычисления")

    model_config = {"frozen": True}

    def get(self, operation: Operation) -> Optional[ReportLine]:
        """Строка отчёта для операции (None, если шаг был пропущен)."""
        for line in self.results:
            if line.operation == operation:
                return line
        return None

    def to_lines(self) -> list[str]:
        return [line.to_text() for line in self.results]

    def to_json_dict(self) -> Dict[str, Any]:
        """
        JSON-представление отчёта.

        Raises:
            ValidationError: Если результат нарушает контракт arithmetic_report
        """
        data = {
            "a": str(self.a),
            "b": str(self.b),
            "results": [line.to_json_dict() for line in self.results],
        }
        validate_arithmetic_report(data)
        return data


# =============================================================================
# REPORT STEPS
# =============================================================================


@dataclass(frozen=True)
class ReportStep:
    """Шаг отчёта: операция, подпись и вычисление."""
    operation: Operation
    label: str
    compute: Callable[[BigNumber, BigNumber], BigNumber]
    requires_nonzero_divisor: bool = False


REPORT_STEPS: tuple[ReportStep, ...] = (
    ReportStep(Operation.ADD, "a + b", BigNumber.add),
    ReportStep(Operation.SUBTRACT, "a - b", BigNumber.subtract),
    ReportStep(Operation.MULTIPLY, "a * b", BigNumber.multiply),
    ReportStep(Operation.DIVIDE, "a / b", BigNumber.div, requires_nonzero_divisor=True),
    ReportStep(Operation.REMAINDER, "a % b", BigNumber.mod, requires_nonzero_divisor=True),
    ReportStep(Operation.AND, "a & b", BigNumber.bitwise_and),
    ReportStep(Operation.OR, "a | b", BigNumber.bitwise_or),
)


def build_report(
    a: BigNumber, b: BigNumber, config: Optional[DriverConfig] = None
) -> ArithmeticReport:
    """
    Построение отчёта по двум операндам.

    Args:
        a: Первый операнд
        b: Второй операнд
        config: Конфигурация драйвера (default: DriverConfig())

    Returns:
        ArithmeticReport с результатами в фиксированном порядке

    Raises:
        DivisionByZero: Если b == 0 и config.skip_division_on_zero=False
    """
    config = config or DriverConfig()
    results = []

    for step in REPORT_STEPS:
        if step.requires_nonzero_divisor and b.is_zero() and config.skip_division_on_zero:
            logger.info("Skipping %s: divisor is zero", step.label)
            continue
        results.append(
            ReportLine(operation=step.operation, label=step.label, value=step.compute(a, b))
        )

    return ArithmeticReport(a=a, b=b, results=tuple(results))
