# Error taxonomy for the Traffic Control client
import sys
import traceback
from types import FrameType
from typing import Any

from .utils.env import is_stack_capture_enabled, is_suppression_enabled

_UNSET: Any = object()


def _describe_cause(cause: BaseException) -> str:
    text = str(cause)
    name = type(cause).__name__
    return f"{name}: {text}" if text else name


def _capture_stack(frame: FrameType) -> tuple[traceback.FrameSummary, ...]:
    # Source lines are read lazily, on first access to FrameSummary.line
    summary = traceback.StackSummary.extract(
        traceback.walk_stack(frame), lookup_lines=False
    )
    summary.reverse()
    return tuple(summary)


class TrafficControlException(Exception):
    """Base exception for errors raised by the Traffic Control client.

    Supports the usual construction shapes: no arguments, a message, a cause,
    a message and a cause, or all of those plus the two diagnostic flags.
    A lone positional exception is taken as the cause, in which case the
    message defaults to the cause's description. Any other non-string message
    is converted with ``str``.

    When the two flags are not given, their defaults are read from the
    TRAFFIC_CONTROL_ENABLE_SUPPRESSION and TRAFFIC_CONTROL_CAPTURE_STACK
    environment variables on every construction, so they are not constant.
    Capturing the stack costs a walk over the live frames; source lines are
    only loaded when a frame's ``line`` is read.

    Args:
        message: Human-readable description of the failure.
        cause: The lower-level error that triggered this one.
        enable_suppression: Whether ``add_suppressed`` records errors.
        writable_stack_trace: Whether to snapshot the call stack on creation.
    """

    serial_version_uid: int = 8146307497196153513

    def __init__(
        self,
        message: str | BaseException | None = _UNSET,
        cause: BaseException | None = None,
        enable_suppression: bool | None = None,
        writable_stack_trace: bool | None = None,
    ) -> None:
        if isinstance(message, BaseException) and cause is None:
            message, cause = _UNSET, message
        if message is _UNSET:
            message = _describe_cause(cause) if cause is not None else None
        elif message is not None and not isinstance(message, str):
            message = str(message)
        if enable_suppression is None:
            enable_suppression = is_suppression_enabled()
        if writable_stack_trace is None:
            writable_stack_trace = is_stack_capture_enabled()

        self._message: str | None = message
        self._cause = cause
        self._enable_suppression = bool(enable_suppression)
        self._writable_stack_trace = bool(writable_stack_trace)
        self._suppressed: list[BaseException] = []
        self._stack_trace: tuple[traceback.FrameSummary, ...] = (
            _capture_stack(sys._getframe(1)) if self._writable_stack_trace else ()
        )

        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def enable_suppression(self) -> bool:
        return self._enable_suppression

    @property
    def writable_stack_trace(self) -> bool:
        return self._writable_stack_trace

    @property
    def suppressed(self) -> tuple[BaseException, ...]:
        """Errors recorded through ``add_suppressed``, oldest first."""
        return tuple(self._suppressed)

    @property
    def stack_trace(self) -> tuple[traceback.FrameSummary, ...]:
        """Call stack captured when the error was created, outermost first."""
        return self._stack_trace

    def add_suppressed(self, exc: BaseException) -> None:
        """Record an error that was suppressed while this one propagated.

        Typically called when cleanup code fails during error handling. Does
        nothing when the error was created with suppression disabled.

        Args:
            exc: The suppressed error.

        Raises:
            TypeError: If exc is not an exception.
            ValueError: If exc is this error.

        """
        if not isinstance(exc, BaseException):
            msg = f"Expected an exception, got {type(exc).__name__}"
            raise TypeError(msg)
        if exc is self:
            msg = "An error cannot suppress itself"
            raise ValueError(msg)
        if not self._enable_suppression:
            return

        self._suppressed.append(exc)
        self.add_note(f"Suppressed: {_describe_cause(exc)}")

    def __reduce__(self) -> tuple[Any, ...]:
        state = {k: v for k, v in self.__dict__.items() if k != "_stack_trace"}
        args = (
            self._message,
            self._cause,
            self._enable_suppression,
            self._writable_stack_trace,
        )
        return self.__class__, args, state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._suppressed = list(state.get("_suppressed", ()))
        if "__notes__" in state:
            self.__notes__ = list(state["__notes__"])
        # Frames from another process are meaningless here
        self._stack_trace = ()


class InvalidJsonException(TrafficControlException):
    """Exception raised when input is not valid JSON."""

    serial_version_uid: int = 1884362711438565843
