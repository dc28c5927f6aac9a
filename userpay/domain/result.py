from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, cast

from .exceptions import DomainException


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success/failure container returned instead of raising for expected errors."""

    _is_success: bool
    _value: Optional[T] = None
    _error: Optional[DomainException] = None

    @classmethod
    def ok(cls, value: T = None) -> "Result[T]":  # type: ignore[assignment]
        return cls(_is_success=True, _value=value)

    @classmethod
    def fail(cls, error: DomainException) -> "Result[T]":
        return cls(_is_success=False, _error=error)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        if not self._is_success:
            raise ValueError("Cannot get value of a failed result")
        return cast(T, self._value)

    @property
    def error(self) -> DomainException:
        if self._is_success:
            raise ValueError("Cannot get error of a successful result")
        return cast(DomainException, self._error)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if not self._is_success:
            raise cast(DomainException, self._error)
        return cast(T, self._value)

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        if not self._is_success:
            return Result.fail(cast(DomainException, self._error))
        return Result.ok(fn(cast(T, self._value)))

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if not self._is_success:
            return Result.fail(cast(DomainException, self._error))
        return fn(cast(T, self._value))

    @staticmethod
    def combine(results: Sequence["Result[T]"]) -> "Result[List[T]]":
        """First failure wins; otherwise all values in order."""
        for result in results:
            if result.is_failure:
                return Result.fail(result.error)
        return Result.ok([result.value for result in results])
