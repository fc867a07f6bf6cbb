"""Presentation helpers for client errors.

Top-level handlers use these to log or surface an error together with its
cause chain and any suppressed errors.
"""

import logging
from collections.abc import Iterator

from pydantic import BaseModel, Field

from .exceptions import TrafficControlException


class ErrorDetail(BaseModel):
    """Structured view of an error and the errors behind it."""

    type: str
    message: str | None = None
    suppressed: list["ErrorDetail"] = Field(default_factory=list)
    cause: "ErrorDetail | None" = None


def _next_cause(exc: BaseException) -> BaseException | None:
    if isinstance(exc, TrafficControlException) and exc.cause is not None:
        return exc.cause
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _message_of(exc: BaseException) -> str | None:
    if isinstance(exc, TrafficControlException):
        return exc.message
    return str(exc) or None


def _suppressed_of(exc: BaseException) -> tuple[BaseException, ...]:
    if isinstance(exc, TrafficControlException):
        return exc.suppressed
    return ()


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """Yield an error followed by each error in its cause chain.

    Args:
        exc: The outermost error.

    Yields:
        The errors from outermost to root cause. A chain that loops back on
        itself is cut at the first repeat.

    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_cause(current)


def describe_error(exc: BaseException) -> ErrorDetail:
    """Build an ErrorDetail tree for an error.

    Args:
        exc: The error to describe.

    Returns:
        ErrorDetail: The error with its cause chain and suppressed errors.

    """
    return _describe(exc, set())


def _describe(exc: BaseException, seen: set[int]) -> ErrorDetail:
    chain = []
    for link in iter_causes(exc):
        if id(link) in seen:
            break
        seen.add(id(link))
        chain.append(link)

    detail = None
    for link in reversed(chain):
        detail = ErrorDetail(
            type=type(link).__name__,
            message=_message_of(link),
            suppressed=[_describe(s, seen) for s in _suppressed_of(link)],
            cause=detail,
        )
    if detail is None:
        # exc was already described higher up the tree
        return ErrorDetail(type=type(exc).__name__, message=_message_of(exc))
    return detail


def _headline(detail: ErrorDetail) -> str:
    if detail.message is None:
        return detail.type
    return f"{detail.type}: {detail.message}"


def _format_lines(detail: ErrorDetail, indent: str) -> list[str]:
    lines = [indent + _headline(detail)]
    current = detail
    while True:
        for suppressed in current.suppressed:
            nested = _format_lines(suppressed, indent + "\t")
            nested[0] = f"{indent}\tSuppressed: {nested[0].lstrip()}"
            lines.extend(nested)
        if current.cause is None:
            return lines
        current = current.cause
        lines.append(f"{indent}Caused by: {_headline(current)}")


def format_error(exc: BaseException) -> str:
    """Render an error and its cause chain as text.

    Example:
        InvalidJsonException: Unexpected token at offset 42
        Caused by: JSONDecodeError: Expecting value: line 1 column 43 (char 42)

    """
    return "\n".join(_format_lines(describe_error(exc), ""))


def log_error(
    exc: BaseException,
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with its cause chain.

    The traceback is attached only for errors that have actually been raised.
    """
    target = logger or logging.getLogger("trafficcontrol-client")
    exc_info = exc if exc.__traceback__ is not None else None
    target.log(level, "%s", format_error(exc), exc_info=exc_info)
