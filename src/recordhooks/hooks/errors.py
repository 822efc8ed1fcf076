"""
Exception hierarchy for hook declaration and dispatch.
"""


class HookError(Exception):
    """Base class for hook errors."""


class HookConfigurationError(HookError):
    """Raised when a hook or hook callback is declared incorrectly."""


class UnknownHookError(HookError, KeyError):
    """Raised when an undeclared hook name is looked up, registered or fired."""

    def __init__(self, name: str, owner: str | None = None) -> None:
        self.name = name
        self.owner = owner
        if owner:
            message = f"Unknown hook '{name}' on '{owner}'"
        else:
            message = f"Unknown hook '{name}'"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
