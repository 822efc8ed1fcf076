"""
Hook dispatch against model instances.
"""

from __future__ import annotations

from typing import Any, Optional

from ..utils import get_correlation_id, get_logger, resolve_slow_hook_ms, time_call
from .errors import HookConfigurationError
from .registry import HookRegistry

logger = get_logger("hooks.runner")


def run_hooks(instance: Any, name: str, registry: Optional[HookRegistry] = None) -> bool:
    """
    Run every callback of hook ``name`` against ``instance`` in order.

    Stops and returns ``False`` as soon as a callback returns exactly
    ``False``; ``None`` and other falsy results do not abort. Exceptions
    raised by callbacks propagate unchanged.
    """

    if registry is None:
        registry = class_registry(type(instance))
    if not registry.has_callbacks(name):
        return True

    model = type(instance).__name__
    with time_call(
        f"hook {model}.{name}",
        logger,
        hook=name,
        model=model,
        threshold_ms=resolve_slow_hook_ms(),
    ):
        for position, body in enumerate(registry.iter_callbacks(name)):
            if body(instance) is False:
                logger.debug(
                    "Hook %s.%s aborted by callback %s",
                    model,
                    name,
                    position,
                    extra={"hook": name, "model": model, "correlation_id": get_correlation_id()},
                )
                return False
    return True


def class_registry(model: type) -> HookRegistry:
    registry = getattr(getattr(model, "_meta", None), "hooks", None)
    if not isinstance(registry, HookRegistry):
        raise HookConfigurationError(
            f"'{model.__name__}' has no hook registry; subclass Model or pass registry="
        )
    return registry


class HookRunner:
    """
    Instance-level hook dispatch mixed into every model.

    The class must carry its registry at ``_meta.hooks``, which
    :class:`~recordhooks.core.model.ModelMeta` sets up.
    """

    def run_hooks(self, name: str) -> bool:
        return run_hooks(self, name)
