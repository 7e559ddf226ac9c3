"""Core error values, aggregation and catalog loading."""

from .aggregate import Errors, ErrorValue, count_of, is_contained_in
from .catalog import CatalogError, ErrorCatalog, load_catalog, load_catalog_or_empty
from .error import Error, ErrorF, ErrorFInstance, ErrorLike, message_of
from .exit_codes import ExitCode
from .result import Err, Ok, Result, is_err

__all__ = [
    # error
    "Error",
    "ErrorF",
    "ErrorFInstance",
    "ErrorLike",
    "message_of",
    # aggregate
    "Errors",
    "ErrorValue",
    "count_of",
    "is_contained_in",
    # catalog
    "CatalogError",
    "ErrorCatalog",
    "load_catalog",
    "load_catalog_or_empty",
    # exit codes
    "ExitCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
]
