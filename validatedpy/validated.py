"""Validated: a two-case result whose independent combination accumulates errors.

`Invalid(error)` and `Valid(value)` mirror `Left`/`Right`, but combining two
values with `ap` (and everything built on it) keeps going past a failure and
merges both errors with the caller's semigroup, left operand first.

`sequence`/`traverse` are the exception: they stop at the first Invalid and
return it unchanged. Use `sequence_accumulating`/`traverse_accumulating` to
collect every error instead.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from .either import Either, Left, Right
from .errors import ValidationFailure
from .logger import get_logger
from .semigroup import ADD, Monoid, Semigroup

E = TypeVar("E")
E2 = TypeVar("E2")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")
T = TypeVar("T")


class Validated(Generic[E, A]):
    def is_valid(self) -> bool: raise NotImplementedError
    def is_invalid(self) -> bool: return not self.is_valid()

    def fold(self, on_invalid: Callable[[E], R], on_valid: Callable[[A], R]) -> R:
        if self.is_valid():
            return on_valid(self.value)  # type: ignore[attr-defined]
        return on_invalid(self.error)  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Validated[E, B]":
        if self.is_valid():
            return Valid(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_error(self, f: Callable[[E], E2]) -> "Validated[E2, A]":
        if self.is_invalid():
            return Invalid(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def bimap(self, on_error: Callable[[E], E2], on_value: Callable[[A], B]) -> "Validated[E2, B]":
        return self.fold(lambda e: Invalid(on_error(e)), lambda a: Valid(on_value(a)))

    def ap(self, va: "Validated[E, Any]", semigroup: Semigroup = ADD) -> "Validated[E, Any]":
        # self holds the function
        return ap(self, va, semigroup)

    def product(self, other: "Validated[E, B]", semigroup: Semigroup = ADD) -> "Validated[E, Tuple[A, B]]":
        return product(self, other, semigroup)

    def zip_with(self, other: "Validated[E, B]", f: Callable[[A, B], C],
                 semigroup: Semigroup = ADD) -> "Validated[E, C]":
        return map2(self, other, f, semigroup)

    def merge(self, other: "Validated[E, A]", error_semigroup: Semigroup = ADD,
              value_semigroup: Semigroup = ADD) -> "Validated[E, A]":
        return merge(self, other, error_semigroup, value_semigroup)

    def to_either(self) -> Either[E, A]:
        return self.fold(Left, Right)

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_valid() else default  # type: ignore[attr-defined]

    def get_or_raise(self) -> A:
        if self.is_valid():
            return self.value  # type: ignore[attr-defined]
        raise ValidationFailure(self.error)  # type: ignore[attr-defined]

    def value_or_none(self) -> Optional[A]:
        return self.value if self.is_valid() else None  # type: ignore[attr-defined]

    def error_or_none(self) -> Optional[E]:
        return None if self.is_valid() else self.error  # type: ignore[attr-defined]

    # Invalid orders before Valid; same variant compares payloads
    def _sort_key(self) -> Tuple[int, Any]:
        return (1, self.value) if self.is_valid() else (0, self.error)  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Validated): return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Validated): return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Validated): return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Validated): return NotImplemented
        return self._sort_key() >= other._sort_key()


@dataclass(frozen=True, repr=False)
class Valid(Validated[E, A]):
    value: A
    def is_valid(self) -> bool: return True
    def __repr__(self) -> str: return f"pure({self.value!r})"


@dataclass(frozen=True, repr=False)
class Invalid(Validated[E, A]):
    error: E
    def is_valid(self) -> bool: return False
    def __repr__(self) -> str: return f"invalid({self.error!r})"


def valid(value: A) -> Validated[Any, A]:
    return Valid(value)


def invalid(error: E) -> Validated[E, Any]:
    return Invalid(error)


def fold(on_invalid: Callable[[E], R], on_valid: Callable[[A], R], v: Validated[E, A]) -> R:
    return v.fold(on_invalid, on_valid)


def is_valid(v: Validated[E, A]) -> bool:
    return v.is_valid()


def to_either(v: Validated[E, A]) -> Either[E, A]:
    return v.to_either()


def from_either(r: Either[E, A]) -> Validated[E, A]:
    return r.fold(Invalid, Valid)


def ap(vf: Validated[E, Callable[[A], B]], va: Validated[E, A], semigroup: Semigroup = ADD) -> Validated[E, B]:
    """Apply a validated function to a validated argument, accumulating errors.

    Both sides are inspected; when both are Invalid the result carries
    ``semigroup(vf.error, va.error)``.
    """
    if vf.is_valid() and va.is_valid():
        return Valid(vf.value(va.value))  # type: ignore[attr-defined]
    if vf.is_invalid() and va.is_invalid():
        return Invalid(semigroup(vf.error, va.error))  # type: ignore[attr-defined]
    return vf if vf.is_invalid() else va  # type: ignore[return-value]


def map2(va: Validated[E, A], vb: Validated[E, B], f: Callable[[A, B], C],
         semigroup: Semigroup = ADD) -> Validated[E, C]:
    return ap(va.map(lambda a: lambda b: f(a, b)), vb, semigroup)


def product(va: Validated[E, A], vb: Validated[E, B], semigroup: Semigroup = ADD) -> Validated[E, Tuple[A, B]]:
    return map2(va, vb, lambda a, b: (a, b), semigroup)


def _curry(f: Callable[..., R], arity: int, args: Tuple[Any, ...] = ()) -> Any:
    if arity == 0:
        return f(*args)
    return lambda x: _curry(f, arity - 1, args + (x,))


def map_n(f: Callable[..., R], *vs: Validated[E, Any], semigroup: Semigroup = ADD) -> Validated[E, R]:
    """Combine N independent validations left to right and apply `f` to their values."""
    return reduce(lambda vf, v: ap(vf, v, semigroup), vs, Valid(_curry(f, len(vs))))


def tupled(*vs: Validated[E, Any], semigroup: Semigroup = ADD) -> Validated[E, Tuple[Any, ...]]:
    return map_n(lambda *xs: tuple(xs), *vs, semigroup=semigroup)


def merge(v1: Validated[E, A], v2: Validated[E, A], error_semigroup: Semigroup = ADD,
          value_semigroup: Semigroup = ADD) -> Validated[E, A]:
    return ap(v1.map(lambda a1: lambda a2: value_semigroup(a1, a2)), v2, error_semigroup)


def empty(value_monoid: Monoid[A]) -> Validated[Any, A]:
    return Valid(value_monoid.empty())


def merge_all(items: Iterable[Validated[E, A]], value_monoid: Monoid[A],
              error_semigroup: Semigroup = ADD) -> Validated[E, A]:
    return reduce(lambda acc, v: merge(acc, v, error_semigroup, value_monoid), items, empty(value_monoid))


def sequence(items: Iterable[Validated[E, A]]) -> Validated[E, List[A]]:
    """Collapse validations into a validation of a list.

    Stops at the first Invalid and returns it as is; later errors are not merged.
    """
    return traverse(items, lambda v: v)


def traverse(items: Iterable[T], f: Callable[[T], Validated[E, A]]) -> Validated[E, List[A]]:
    out: List[A] = []
    for i, item in enumerate(items):
        v = f(item)
        if v.is_invalid():
            get_logger().debug("traverse stopped at first invalid", index=i)
            return v  # type: ignore[return-value]
        out.append(v.value)  # type: ignore[attr-defined]
    return Valid(out)


def traverse_accumulating(items: Iterable[T], f: Callable[[T], Validated[E, A]],
                          semigroup: Semigroup = ADD) -> Validated[E, List[A]]:
    out: List[A] = []
    errors: Optional[Validated[E, Any]] = None
    for item in items:
        v = f(item)
        if v.is_valid():
            if errors is None:
                out.append(v.value)  # type: ignore[attr-defined]
        else:
            # same left-first merge that ap applies to two Invalid values
            errors = v if errors is None else ap(errors, v, semigroup)
    return Valid(out) if errors is None else errors  # type: ignore[return-value]


def sequence_accumulating(items: Iterable[Validated[E, A]], semigroup: Semigroup = ADD) -> Validated[E, List[A]]:
    return traverse_accumulating(items, lambda v: v, semigroup)
