"""Comparable error values and error aggregation."""

from errkit.core import (
    Error,
    ErrorF,
    ErrorFInstance,
    ErrorLike,
    Errors,
    ErrorValue,
    count_of,
    is_contained_in,
    message_of,
)

__version__ = "0.1.0"

__all__ = [
    "Error",
    "ErrorF",
    "ErrorFInstance",
    "ErrorLike",
    "Errors",
    "ErrorValue",
    "count_of",
    "is_contained_in",
    "message_of",
    "__version__",
]
