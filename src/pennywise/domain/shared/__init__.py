"""Shared domain building blocks."""

from pennywise.domain.shared.result import Err, ErrorCode, Ok, Result
from pennywise.domain.shared.time import today_utc, utc_now

__all__ = [
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "today_utc",
    "utc_now",
]
