"""
Result type for operations that can succeed or fail.

Storage calls hand back a ``Result`` instead of raising, so callers branch on
``is_success`` before unwrapping. ``get_value()`` on a failure raises the carried
error on purpose.
"""

from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


class Result(Generic[T, E]):
    """Success value or failure error, never both."""

    __slots__ = ("_value", "_error", "_is_success")

    def __init__(self, value: Optional[T], error: Optional[E], is_success: bool):
        self._value = value
        self._error = error
        self._is_success = is_success

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T, E]":
        """Create a successful result"""
        return cls(value, None, True)

    @classmethod
    def fail(cls, error: E) -> "Result[T, E]":
        """Create a failed result"""
        return cls(None, error, False)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    def get_value(self) -> Optional[T]:
        """Return the value, or raise the carried error if this is a failure."""
        if not self._is_success:
            if self._error is not None:
                raise self._error
            raise RuntimeError("Cannot get value from a failed Result")
        return self._value

    def get_error(self) -> Optional[E]:
        """Return the error, or None if this is a success."""
        return self._error

    def map(self, fn: Callable[[Optional[T]], U]) -> "Result[U, Any]":
        """Transform the value of a successful result; exceptions become failures."""
        if not self._is_success:
            return Result.fail(self._error)
        try:
            return Result.ok(fn(self._value))
        except Exception as exc:
            return Result.fail(exc)

    async def map_async(
        self, fn: Callable[[Optional[T]], Awaitable[U]]
    ) -> "Result[U, Any]":
        """Same contract as ``map`` for a coroutine function."""
        if not self._is_success:
            return Result.fail(self._error)
        try:
            return Result.ok(await fn(self._value))
        except Exception as exc:
            return Result.fail(exc)

    @staticmethod
    async def from_awaitable(
        awaitable: Awaitable[T],
        error_mapper: Optional[Callable[[Exception], BaseException]] = None,
    ) -> "Result[T, Any]":
        """Await ``awaitable`` and wrap its outcome in a Result."""
        try:
            value = await awaitable
        except Exception as exc:
            return Result.fail(error_mapper(exc) if error_mapper else exc)
        return Result.ok(value)

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error!r})"
