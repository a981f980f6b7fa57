"""Result container and error taxonomy.

- Result/Ok/Err: two-variant container with railway-oriented combinators
- NetworkError, HttpError, ValidationError, NotFoundError, ParseError,
  DeadlineError: the closed set of common failure kinds
- match_error/error_matcher: exhaustive dispatch over the taxonomy
- UnwrapError/MissingHandlerError: defects raised by the library
"""

from .errors import (
    ERROR_TAGS,
    ErrorTag,
    MissingHandlerError,
    ResultcaseError,
    UnwrapError,
    classify_exception,
)
from .kinds import (
    ERROR_KINDS,
    CommonError,
    DeadlineError,
    HttpError,
    NetworkError,
    NotFoundError,
    ParseError,
    ValidationError,
    error_matcher,
    match_error,
)
from .result import Err, Ok, Result

__all__ = [
    # Result
    "Result", "Ok", "Err",
    # Error kinds
    "CommonError", "NetworkError", "HttpError", "ValidationError", "NotFoundError", "ParseError", "DeadlineError",
    "ErrorTag", "ERROR_TAGS", "ERROR_KINDS",
    # Dispatch
    "match_error", "error_matcher", "classify_exception",
    # Exceptions
    "ResultcaseError", "UnwrapError", "MissingHandlerError",
]
