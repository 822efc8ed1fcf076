"""
Utility helpers shared across recordhooks packages.
"""

from .logging import configure_logging, correlation_scope, get_correlation_id, get_logger, time_call
from .performance import resolve_slow_hook_ms

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
    "resolve_slow_hook_ms",
    "time_call",
]
