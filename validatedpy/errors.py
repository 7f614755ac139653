from __future__ import annotations
from typing import Generic, TypeVar

E = TypeVar("E")


class ValidationFailure(Exception, Generic[E]):
    """Raised when an Invalid value is forcibly unwrapped."""

    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error
