from .diagnostics import ErrorDetail, describe_error, format_error, iter_causes, log_error
from .exceptions import InvalidJsonException, TrafficControlException

__all__ = [
    "ErrorDetail",
    "InvalidJsonException",
    "TrafficControlException",
    "describe_error",
    "format_error",
    "iter_causes",
    "log_error",
]
