"""
Built-in hook names.
"""

from __future__ import annotations

import keyword

from .errors import HookConfigurationError

# Hooks that are safe for public use.
PUBLIC_HOOKS = (
    "after_initialize",
    "before_create",
    "after_create",
    "before_update",
    "after_update",
    "before_save",
    "after_save",
    "before_destroy",
    "after_destroy",
    "before_validation",
    "after_validation",
)

# Hooks meant for persistence collaborators and plugins only.
PRIVATE_HOOKS = (
    "before_update_values",
    "before_delete",
)

DEFAULT_HOOKS = PUBLIC_HOOKS + PRIVATE_HOOKS


def is_private_hook(name: str) -> bool:
    return name in PRIVATE_HOOKS


def validate_hook_name(name: object) -> str:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise HookConfigurationError(f"Invalid hook name {name!r}; expected a Python identifier")
    if name.startswith("__"):
        raise HookConfigurationError(f"Invalid hook name {name!r}; dunder names are reserved")
    return name
