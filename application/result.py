"""
Success/failure outcome returned by every store operation.

Mirrors the result dataclasses used by the use cases: a `success` flag, the
value on success, and the original exception on failure. The exception is
kept as-is so callers can inspect the underlying store error.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation."""
    success: bool
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: BaseException) -> "Result[T]":
        return cls(success=False, error=error)

    @property
    def failed(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """
        Return the value, or raise the stored error.

        Raises:
            The original exception carried by a failed result.
        """
        if not self.success:
            raise self.error
        return self.value
