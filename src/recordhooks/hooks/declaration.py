"""
Class-level accessors and instance-level triggers for declared hooks.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple, Type

from .registry import HookBody
from .runner import run_hooks

HOOK_MARKER = "__recordhooks__"


class HookAccessor:
    """
    Registers callbacks for one hook on one model class.

    ``Post.before_save(block=fn)`` appends ``fn``; ``Post.before_save("stamp")``
    appends a call to ``post.stamp()``; passing a tag that is already
    registered replaces that callback in place.
    """

    def __init__(self, model: Type[Any], name: str) -> None:
        self.model = model
        self.name = name

    def __repr__(self) -> str:
        return f"<HookAccessor {self.model.__name__}.{self.name}>"

    def __call__(self, tag: Optional[str] = None, block: Optional[HookBody] = None) -> HookBody:
        return self.model._meta.hooks.register(self.name, tag, block)

    def callback(self, tag: Optional[str] = None) -> Callable[[HookBody], HookBody]:
        def decorator(func: HookBody) -> HookBody:
            self(tag, func)
            return func

        return decorator


class HookTrigger:
    def __init__(self, instance: Any, name: str) -> None:
        self.instance = instance
        self.name = name

    def __repr__(self) -> str:
        return f"<HookTrigger {type(self.instance).__name__}.{self.name}>"

    def __call__(self) -> bool:
        return run_hooks(self.instance, self.name)


class HookDescriptor:
    """
    Installed once per declared hook name.

    Read from the class it yields a :class:`HookAccessor`; read from an
    instance it yields the zero-argument :class:`HookTrigger`.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return HookAccessor(owner, self.name)
        return HookTrigger(instance, self.name)


def hook(name: str, *, tag: Optional[str] = None) -> Callable[[Callable], Callable]:
    """
    Mark a model method as a callback for hook ``name``.

    The method is registered when its class is created, tagged with the
    method name unless ``tag`` is given.
    """

    def decorator(func: Callable) -> Callable:
        marks: List[Tuple[str, Optional[str]]] = getattr(func, HOOK_MARKER, [])
        setattr(func, HOOK_MARKER, marks + [(name, tag)])
        return func

    return decorator


def hook_marks(value: Any) -> List[Tuple[str, Optional[str]]]:
    return list(getattr(value, HOOK_MARKER, ()))
