"""Environment-driven defaults for error diagnostics."""

import logging
import os

logger = logging.getLogger("trafficcontrol-client")

ENABLE_SUPPRESSION_ENV = "TRAFFIC_CONTROL_ENABLE_SUPPRESSION"
CAPTURE_STACK_ENV = "TRAFFIC_CONTROL_CAPTURE_STACK"

_TRUTHY = frozenset({"true", "1", "yes", "on"})
_FALSY = frozenset({"false", "0", "no", "off"})


def get_bool_env(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Args:
        name: Name of the environment variable.
        default: Value used when the variable is unset, empty or unrecognized.

    Returns:
        The parsed flag.

    """
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if not value:
        return default
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False

    logger.warning(
        "Ignoring unrecognized value %r for %s, using %s", raw, name, default
    )
    return default


def is_suppression_enabled() -> bool:
    """Check whether new errors track suppressed errors by default."""
    return get_bool_env(ENABLE_SUPPRESSION_ENV, default=True)


def is_stack_capture_enabled() -> bool:
    """Check whether new errors snapshot the call stack by default."""
    return get_bool_env(CAPTURE_STACK_ENV, default=True)
