"""Result type for remote parameter store calls."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FetchError(Exception):
    """A remote parameter store call was rejected or failed."""

    def __init__(
        self,
        operation: str,
        message: str,
        name: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.operation = operation
        self.message = message
        self.name = name
        self.code = code
        super().__init__(self._describe())

    def _describe(self) -> str:
        target = f" for parameter {self.name!r}" if self.name is not None else ""
        code = f" [{self.code}]" if self.code else ""
        return f"{self.operation} failed{target}{code}: {self.message}"


class FetchResult(Generic[T]):
    """Either a fetched value or the FetchError that prevented it."""

    def __init__(self, value: Optional[T] = None, error: Optional[FetchError] = None):
        if error is not None and value is not None:
            raise ValueError("FetchResult cannot hold both a value and an error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> "FetchResult[T]":
        """Successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        """Failed result."""
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def value(self) -> T:
        """The fetched value. Raises the FetchError on a failed result."""
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> Optional[FetchError]:
        return self._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"FetchResult.failure({self._error})"
        return "FetchResult.ok(...)"
