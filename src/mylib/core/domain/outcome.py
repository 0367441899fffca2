"""
Outcome: результат операции (значение или код ошибки)

Tagged union из двух immutable dataclass:
- Success(value): успешный результат
- Failure(error): код ошибки

Ровно одно из двух присутствует всегда. Вызывающий код обязан проверить
тег (is_ok / match) прежде чем обращаться к значению; unwrap() на Failure
вызывает UnwrapError.

Пример:
    match divide(10.0, b):
        case Success(value):
            print(value)
        case Failure(error):
            print(error_to_string(error))
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class UnwrapError(ValueError):
    """Попытка извлечь значение из Failure."""

    def __init__(self, error: object):
        self.error = error
        super().__init__(f"called unwrap() on Failure({error!r})")


# =============================================================================
# SUCCESS
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Успешный результат операции."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Применить fn к значению, сохранив тег Success."""
        return Success(fn(self.value))

    def and_then(self, fn: Callable[[T], "Outcome[U, E]"]) -> "Outcome[U, E]":
        """
        Последовательная композиция: передать значение в следующую операцию.

        Args:
            fn: Функция, возвращающая новый Outcome

        Returns:
            Результат fn(value)
        """
        return fn(self.value)


# =============================================================================
# FAILURE
# =============================================================================


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Неуспешный результат операции с кодом ошибки."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(self.error)

    def unwrap_or(self, default):
        return default

    def map(self, fn) -> "Failure[E]":
        # Ошибка проходит дальше без изменений
        return self

    def and_then(self, fn) -> "Failure[E]":
        return self


Outcome = Union[Success[T], Failure[E]]
