"""Driver: отчёт по двум операндам и command-line интерфейс."""

from .report import (
    REPORT_STEPS,
    ArithmeticReport,
    DriverConfig,
    Operation,
    ReportLine,
    ReportStep,
    build_report,
)

__all__ = [
    "REPORT_STEPS",
    "ArithmeticReport",
    "DriverConfig",
    "Operation",
    "ReportLine",
    "ReportStep",
    "build_report",
]
