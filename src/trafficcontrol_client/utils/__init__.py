from .env import get_bool_env, is_stack_capture_enabled, is_suppression_enabled

__all__ = ["get_bool_env", "is_stack_capture_enabled", "is_suppression_enabled"]
