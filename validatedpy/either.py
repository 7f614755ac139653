from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Either(Generic[E, A]):
    """Plain disjoint result; `flat_map` stops at the first Left."""

    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def fold(self, on_left: Callable[[E], R], on_right: Callable[[A], R]) -> R:
        if self.is_left():
            return on_left(self.error)  # type: ignore[attr-defined]
        return on_right(self.value)  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_right():
            return Right(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        if self.is_right():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_left():
            return Left(f(self.error))  # type: ignore[attr-defined]
        return Right(self.value)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]

    # Left orders before Right; same side compares payloads
    def _sort_key(self) -> Tuple[int, Any]:
        return (0, self.error) if self.is_left() else (1, self.value)  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Either): return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Either): return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Either): return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Either): return NotImplemented
        return self._sort_key() >= other._sort_key()


@dataclass(frozen=True)
class Left(Either[E, A]):
    error: E
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A
    def is_left(self) -> bool: return False
