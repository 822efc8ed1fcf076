"""
Dispatch timing configuration.
"""

from __future__ import annotations

import os
from typing import Optional

SLOW_HOOK_ENV_VAR = "RECORDHOOKS_SLOW_HOOK_MS"


def resolve_slow_hook_ms(default: int = 100, override: Optional[int] = None) -> int:
    """
    Resolve the slow-dispatch warning threshold in milliseconds.

    An explicit ``override`` wins over ``RECORDHOOKS_SLOW_HOOK_MS``, which in
    turn wins over ``default``.
    """

    if override is not None:
        return _validate(override, source="override")
    value = os.getenv(SLOW_HOOK_ENV_VAR)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(
            f"Environment variable {SLOW_HOOK_ENV_VAR} must be an integer, got {value!r}"
        ) from exc
    return _validate(parsed, source=SLOW_HOOK_ENV_VAR)


def _validate(value: int, *, source: str) -> int:
    if value < 0:
        raise ValueError(f"Slow hook threshold from {source} must be >= 0, got {value}")
    return value
