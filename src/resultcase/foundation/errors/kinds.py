"""Closed taxonomy of common failure kinds and its exhaustive dispatcher.

Each kind is a frozen Pydantic model carrying a ``tag`` literal plus its own
payload. Kinds are plain data: they are not exceptions and are meant to travel
inside ``Err``. Payload content is not validated beyond field types.

Example:
    >>> from resultcase import Err, HttpError, error_matcher
    >>> failure = Err(HttpError(status=503, status_text="Service Unavailable", url="https://api"))
    >>> describe = error_matcher(
    ...     NetworkError=lambda e: "offline",
    ...     HttpError=lambda e: f"http {e.status}",
    ...     ValidationError=lambda e: "; ".join(e.messages),
    ...     NotFoundError=lambda e: f"no {e.resource}",
    ...     ParseError=lambda e: "garbled",
    ...     DeadlineError=lambda e: f"{e.operation} timed out",
    ... )
    >>> describe(failure.unwrap_err())
    'http 503'
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal, TypeAlias, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import ERROR_TAGS, ErrorTag, MissingHandlerError

T = TypeVar("T")

_KIND_CONFIG = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True, revalidate_instances="never")


class NetworkError(BaseModel):
    """Transport-level failure before any response was received."""

    model_config = _KIND_CONFIG

    tag: Literal["NetworkError"] = "NetworkError"
    cause: Any = Field(default=None, repr=False)
    url: str | None = None


class HttpError(BaseModel):
    """Protocol/status failure: a response arrived with an error status."""

    model_config = _KIND_CONFIG

    tag: Literal["HttpError"] = "HttpError"
    status: int
    status_text: str
    url: str


class ValidationError(BaseModel):
    """Input rejected; messages keep their original order."""

    model_config = _KIND_CONFIG

    tag: Literal["ValidationError"] = "ValidationError"
    messages: tuple[str, ...]
    field: str | None = None


class NotFoundError(BaseModel):
    """Requested resource does not exist."""

    model_config = _KIND_CONFIG

    tag: Literal["NotFoundError"] = "NotFoundError"
    resource: str
    id: str | None = None


class ParseError(BaseModel):
    """Decoding or parsing failed; ``input`` holds the offending text when known."""

    model_config = _KIND_CONFIG

    tag: Literal["ParseError"] = "ParseError"
    cause: Any = Field(default=None, repr=False)
    input: str | None = Field(default=None, repr=False)


class DeadlineError(BaseModel):
    """An operation gave up after ``timeout`` seconds."""

    model_config = _KIND_CONFIG

    tag: Literal["DeadlineError"] = "DeadlineError"
    operation: str
    timeout: float


CommonError: TypeAlias = Annotated[
    Union[NetworkError, HttpError, ValidationError, NotFoundError, ParseError, DeadlineError],
    Field(discriminator="tag"),
]

ERROR_KINDS: Mapping[str, type[BaseModel]] = {
    ErrorTag.NETWORK.value: NetworkError,
    ErrorTag.HTTP.value: HttpError,
    ErrorTag.VALIDATION.value: ValidationError,
    ErrorTag.NOT_FOUND.value: NotFoundError,
    ErrorTag.PARSE.value: ParseError,
    ErrorTag.DEADLINE.value: DeadlineError,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Exhaustive dispatch
# ═══════════════════════════════════════════════════════════════════════════════


def _handler_table(
    handlers: Mapping[str, Callable[[Any], T]] | None,
    named: Mapping[str, Callable[[Any], T]],
) -> dict[str, Callable[[Any], T]]:
    """Merge positional and keyword handlers, keyed by plain tag string."""
    table = {str(tag): fn for tag, fn in (handlers or {}).items()}
    table.update(named)
    keys = set(table)
    missing, unknown = ERROR_TAGS - keys, keys - ERROR_TAGS
    if missing or unknown:
        raise MissingHandlerError(missing, unknown)
    return table


def error_matcher(
    handlers: Mapping[str, Callable[[Any], T]] | None = None,
    /,
    **named: Callable[[Any], T],
) -> Callable[[CommonError], T]:
    """Build a reusable dispatcher over the closed taxonomy.

    Exhaustiveness is checked here, once, when the dispatcher is built: a
    missing or unknown tag raises MissingHandlerError before any error is
    dispatched. There is no default arm.
    """
    table = _handler_table(handlers, named)

    def dispatch(error: CommonError) -> T:
        tag = getattr(error, "tag", None)
        if tag not in table:
            raise MissingHandlerError(unknown=(repr(tag),))
        return table[tag](error)

    return dispatch


def match_error(
    error: CommonError,
    handlers: Mapping[str, Callable[[Any], T]] | None = None,
    /,
    **named: Callable[[Any], T],
) -> T:
    """Dispatch ``error`` to the handler registered for its tag.

    Every tag in the taxonomy needs a handler, even those this call will not
    use; the check runs before dispatch.
    """
    return error_matcher(handlers, **named)(error)
