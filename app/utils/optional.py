"""단건 조회 결과 컨테이너.

Explicit present/absent container for single-result repository queries.
Lets callers choose how to treat "no match" instead of receiving ``None``.

Usage:
    member = (await member_repository.find_optional_by_username(db, "memberA")).or_else_raise(
        NotFoundError("Member not found")
    )
"""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class OptionalResult(Generic[T]):
    """값이 있거나 비어 있는 컨테이너 (A value that may be absent)."""

    __slots__ = ("_value",)

    def __init__(self, value: T | None = None) -> None:
        self._value = value

    @classmethod
    def of(cls, value: T | None) -> "OptionalResult[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "OptionalResult[T]":
        return cls(None)

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        """값을 반환합니다. 비어 있으면 LookupError.

        Return the value, raising LookupError when empty.
        """
        if self._value is None:
            raise LookupError("No value present")
        return self._value

    def or_else(self, default: T | None) -> T | None:
        return self._value if self._value is not None else default

    def or_else_raise(self, exc: Exception) -> T:
        if self._value is None:
            raise exc
        return self._value

    def map(self, mapper: Callable[[T], U]) -> "OptionalResult[U]":
        if self._value is None:
            return OptionalResult()
        return OptionalResult(mapper(self._value))

    def __bool__(self) -> bool:
        return self._value is not None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OptionalResult) and self._value == other._value

    def __repr__(self) -> str:
        if self._value is None:
            return "OptionalResult.empty"
        return f"OptionalResult[{self._value!r}]"
