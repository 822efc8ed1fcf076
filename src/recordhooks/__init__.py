"""
recordhooks public package initialization.

Exposes the model base class together with the hook declaration,
registration and dispatch APIs.
"""

from .core.model import Model, ModelConfigurationError  # noqa: F401
from .hooks import (
    DEFAULT_HOOKS,
    PRIVATE_HOOKS,
    PUBLIC_HOOKS,
    HookConfigurationError,
    HookError,
    HookRegistry,
    MethodCall,
    UnknownHookError,
    hook,
    run_hooks,
)  # noqa: F401

__all__ = [
    "Model",
    "ModelConfigurationError",
    "DEFAULT_HOOKS",
    "PUBLIC_HOOKS",
    "PRIVATE_HOOKS",
    "HookConfigurationError",
    "HookError",
    "HookRegistry",
    "MethodCall",
    "UnknownHookError",
    "hook",
    "run_hooks",
]
