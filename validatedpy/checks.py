from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar

from .logger import get_logger
from .semigroup import ADD, Semigroup
from .validated import Invalid, Valid, Validated, ap

E = TypeVar("E")
A = TypeVar("A")
T = TypeVar("T")


def cond(test: bool, value: A, error: E) -> Validated[E, A]:
    return Valid(value) if test else Invalid(error)


def from_predicate(predicate: Callable[[T], bool], error: Optional[E] = None,
                   error_fn: Optional[Callable[[T], E]] = None) -> Callable[[T], Validated[E, T]]:
    """Turn a predicate into a check.

    A rejected input yields ``Invalid(error_fn(x))`` when `error_fn` is given,
    otherwise ``Invalid(error)``; `error` is used as is even when it is callable.
    """
    def check(x: T) -> Validated[E, T]:
        if predicate(x):
            return Valid(x)
        return Invalid(error_fn(x) if error_fn is not None else error)
    return check


def from_optional(value: Optional[A], error: E) -> Validated[E, A]:
    return Invalid(error) if value is None else Valid(value)


def attempt(thunk: Callable[[], A], on_error: Callable[[Exception], E]) -> Validated[E, A]:
    try:
        return Valid(thunk())
    except Exception as ex:
        get_logger().debug("attempt captured exception", exc_type=type(ex).__name__)
        return Invalid(on_error(ex))


def validate_all(value: T, *checks: Callable[[T], Validated[E, Any]],
                 semigroup: Semigroup = ADD) -> Validated[E, T]:
    """Run every check against `value`; errors accumulate in check order."""
    log = get_logger()
    acc: Validated[E, T] = Valid(value)
    for i, check in enumerate(checks):
        v = check(value)
        if v.is_invalid():
            log.debug("check failed", check=i, error=v.error)  # type: ignore[attr-defined]
        # keep the original value, only the error channel matters here
        acc = ap(acc.map(lambda x: lambda _: x), v, semigroup)
    return acc
