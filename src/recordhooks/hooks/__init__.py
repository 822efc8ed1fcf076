"""
Lifecycle hooks registry for recordhooks models.
"""

from .declaration import HookAccessor, HookDescriptor, HookTrigger, hook
from .errors import HookConfigurationError, HookError, UnknownHookError
from .names import DEFAULT_HOOKS, PRIVATE_HOOKS, PUBLIC_HOOKS, is_private_hook
from .registry import CallbackEntry, HookRegistry, MethodCall
from .runner import HookRunner, run_hooks

__all__ = [
    "CallbackEntry",
    "DEFAULT_HOOKS",
    "HookAccessor",
    "HookConfigurationError",
    "HookDescriptor",
    "HookError",
    "HookRegistry",
    "HookRunner",
    "HookTrigger",
    "MethodCall",
    "PRIVATE_HOOKS",
    "PUBLIC_HOOKS",
    "UnknownHookError",
    "hook",
    "is_private_hook",
    "run_hooks",
]
