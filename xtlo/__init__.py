"""Helpers for lists, numbers and strings, with retry, debounce, throttle and timing utilities."""

__version__ = "0.1.0"
__all__ = ["arith", "mutable", "parallel", "retry", "slicing", "text", "timing", "transform"]