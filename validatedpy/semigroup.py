from __future__ import annotations
from dataclasses import dataclass
import operator
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Semigroup(Generic[T]):
    """An associative binary operation, passed explicitly where it is needed."""
    combine: Callable[[T, T], T]
    name: str = "semigroup"

    def __call__(self, x: T, y: T) -> T:
        return self.combine(x, y)

    def combine_all(self, first: T, rest: Iterable[T]) -> T:
        acc = first
        for x in rest:
            acc = self.combine(acc, x)
        return acc

    def __repr__(self) -> str: return f"Semigroup({self.name})"


@dataclass(frozen=True)
class Monoid(Semigroup[T]):
    # factory so that mutable identities are never shared
    empty: Optional[Callable[[], T]] = None

    def __post_init__(self) -> None:
        if self.empty is None:
            raise TypeError(f"Monoid {self.name!r} requires an empty factory")

    def fold_all(self, items: Iterable[T]) -> T:
        return self.combine_all(self.empty(), items)  # type: ignore[misc]

    def __repr__(self) -> str: return f"Monoid({self.name})"


ADD: Semigroup = Semigroup(operator.add, "add")
STRING: Monoid[str] = Monoid(operator.add, "string", str)
LIST: Monoid[list] = Monoid(operator.add, "list", list)
TUPLE: Monoid[tuple] = Monoid(operator.add, "tuple", tuple)
SUM: Monoid[int] = Monoid(operator.add, "sum", int)
PRODUCT: Monoid[int] = Monoid(operator.mul, "product", lambda: 1)
FIRST: Semigroup = Semigroup(lambda x, _y: x, "first")
LAST: Semigroup = Semigroup(lambda _x, y: y, "last")
MIN: Semigroup = Semigroup(min, "min")
MAX: Semigroup = Semigroup(max, "max")


def joined(separator: str) -> Semigroup[str]:
    return Semigroup(lambda x, y: f"{x}{separator}{y}", f"joined({separator!r})")
