"""
Logging Configuration Module

Настройка логирования драйвера. Арифметическое ядро не логирует.
"""

import logging
import sys
from typing import Final, Optional, TextIO

# Корневой логгер пакета
LOGGER_NAME: Final[str] = "bignumber"

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: str = "WARNING",
    logger_name: str = LOGGER_NAME,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Настройка логгера пакета.

    Существующие обработчики удаляются, чтобы повторные вызовы
    (например, в тестах) не дублировали сообщения.

    Args:
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя логгера
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если уровень неизвестен
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
