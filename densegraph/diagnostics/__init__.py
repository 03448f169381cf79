"""Diagnostics and debugging utilities for densegraph."""

from .core import (
    assert_sentinel_consistent,
    assert_symmetric,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_symmetric",
    "assert_symmetric",
    "assert_sentinel_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
