"""Bridge from ``Result`` values to the HTTP error envelope."""

from typing import TypeVar

from pennywise.domain.shared import Err, Result

T = TypeVar("T")


class ResultError(Exception):
    """Carries an ``Err`` out of a router to the exception handlers."""

    def __init__(self, err: Err) -> None:
        self.err = err
        super().__init__(err.message)


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise ``ResultError`` for an ``Err``."""
    if isinstance(result, Err):
        raise ResultError(result)
    return result.value
