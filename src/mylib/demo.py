"""
Demo: Консольная демонстрация калькулятора

Печатает фиксированные примеры для a=10.0, b=3.0 и пример деления на ноль,
показывая обе ветви Outcome (Success / Failure). Аргументов и переменных
окружения нет; код возврата 0.
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from mylib.calculator import add, divide, error_to_string, multiply, subtract
from mylib.core.domain.outcome import Failure, Success
from mylib.core.domain.record import CalculationRecord, Operation
from mylib.logging import configure_logging, ensure_logging_configured, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демонстрации.

    - a, b: операнды основных примеров
    - zero: знаменатель для примера деления на ноль
    - log_level: уровень structlog (события demo.* пишутся на DEBUG)
    """
    a: float = 10.0
    b: float = 3.0
    zero: float = 0.0
    log_level: str = "WARNING"


_SYMBOLS = {
    Operation.ADD: ("Addition", "+"),
    Operation.SUBTRACT: ("Subtraction", "-"),
    Operation.MULTIPLY: ("Multiplication", "*"),
    Operation.DIVIDE: ("Division", "/"),
}


def format_number(value: float) -> str:
    """
    Кратчайшая запись float без хвоста ".0" (10.0 -> "10", 3.5 -> "3.5").

    repr даёт кратчайшее round-trip представление; целые значения
    печатаются без дробной части.
    """
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_record(record: CalculationRecord) -> str:
    """Строка вывода для одной записи."""
    label, symbol = _SYMBOLS[record.operation]
    if record.ok:
        return (
            f"{label}: {format_number(record.a)} {symbol} "
            f"{format_number(record.b)} = {format_number(record.value)}"
        )
    return f"{label} error: {record.message}"


def _divide_record(a: float, b: float) -> CalculationRecord:
    outcome = divide(a, b)
    match outcome:
        case Success(value):
            logger.debug("demo.division", a=a, b=b, value=value)
        case Failure(error):
            logger.debug("demo.division_failed", a=a, b=b, error=error.value)
    return CalculationRecord.from_outcome(Operation.DIVIDE, a, b, outcome)


def run_demo(config: Optional[DemoConfig] = None, out: Optional[TextIO] = None) -> List[CalculationRecord]:
    """
    Выполнение демонстрации.

    Args:
        config: Конфигурация (default: DemoConfig())
        out: Поток вывода (default: sys.stdout)

    Returns:
        Записи напечатанных операций в порядке вывода
    """
    config = config or DemoConfig()
    out = out or sys.stdout
    ensure_logging_configured(config.log_level)
    a, b = config.a, config.b

    print("Calculator Demo", file=out)
    print("===============", file=out)
    print(file=out)
    print(f"a = {format_number(a)}, b = {format_number(b)}", file=out)
    print(file=out)

    records = [
        CalculationRecord.from_outcome(Operation.ADD, a, b, Success(add(a, b))),
        CalculationRecord.from_outcome(Operation.SUBTRACT, a, b, Success(subtract(a, b))),
        CalculationRecord.from_outcome(Operation.MULTIPLY, a, b, Success(multiply(a, b))),
        _divide_record(a, b),
    ]
    for record in records:
        print(format_record(record), file=out)

    print(file=out)
    print("Testing division by zero:", file=out)
    zero_record = _divide_record(a, config.zero)
    print(format_record(zero_record), file=out)
    records.append(zero_record)

    return records


def main() -> int:
    """Точка входа консольной программы."""
    config = DemoConfig()
    configure_logging(level=config.log_level)
    records = run_demo(config)
    logger.debug("demo.finished", records=len(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
