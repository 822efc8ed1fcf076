"""
Model base classes and hook metadata orchestration for recordhooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Type

from ..hooks.declaration import HookDescriptor, hook_marks
from ..hooks.errors import HookConfigurationError
from ..hooks.names import DEFAULT_HOOKS, validate_hook_name
from ..hooks.registry import HookBody, HookRegistry, MethodCall
from ..hooks.runner import HookRunner


class ModelConfigurationError(Exception):
    """Raised when a model class is misconfigured."""


@dataclass
class ModelOptions:
    """
    Container for model metadata calculated by :class:`ModelMeta`.
    """

    model: Type["Model"]
    hooks: HookRegistry
    inherit_hooks: bool = True


class ModelMeta(type):
    """
    Metaclass giving every model class its own hook registry.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], attrs: Dict[str, Any]) -> "ModelMeta":
        cls = super().__new__(mcls, name, bases, attrs)

        meta = attrs.get("Meta")
        inherit_hooks = getattr(meta, "inherit_hooks", True)
        extra_hooks = _declared_hook_names(name, getattr(meta, "hooks", ()))

        parent = _parent_registry(bases)
        if parent is None:
            registry = HookRegistry(owner=name)
        elif inherit_hooks:
            registry = parent.copy(owner=name)
        else:
            registry = parent.fresh(owner=name)
        cls._meta = ModelOptions(model=cls, hooks=registry, inherit_hooks=inherit_hooks)

        for attr_name, value in attrs.items():
            if attr_name in registry and not isinstance(value, HookDescriptor):
                raise ModelConfigurationError(
                    f"Model '{name}' defines '{attr_name}', which shadows the hook of the same "
                    f"name. Register it with @hook('{attr_name}') on a differently named method."
                )

        if parent is None:
            for hook_name in DEFAULT_HOOKS:
                cls.define_hook(hook_name)
        for hook_name in extra_hooks:
            cls.define_hook(hook_name)

        # Decorated methods register in definition order, called by name so
        # subclass overrides are picked up.
        for attr_name, value in attrs.items():
            for hook_name, tag in hook_marks(value):
                registry.register(hook_name, tag or attr_name, MethodCall(attr_name))

        return cls


def _parent_registry(bases: Tuple[type, ...]) -> Optional[HookRegistry]:
    for base in bases:
        meta = getattr(base, "_meta", None)
        if isinstance(meta, ModelOptions):
            return meta.hooks
    return None


def _all_subclasses(cls: type) -> Iterator[type]:
    for subclass in cls.__subclasses__():
        if isinstance(getattr(subclass, "_meta", None), ModelOptions):
            yield subclass
        yield from _all_subclasses(subclass)


def _declared_hook_names(model_name: str, names: Any) -> Tuple[str, ...]:
    if isinstance(names, str) or not isinstance(names, Iterable):
        raise ModelConfigurationError(
            f"Model '{model_name}' Meta.hooks must be an iterable of hook names, got {names!r}"
        )
    return tuple(names)


class Model(HookRunner, metaclass=ModelMeta):
    """
    Base data-record class exposing lifecycle hooks.
    Persistence is supplied by collaborators that fire the hook triggers.
    """

    def __init__(self, **values: Any) -> None:
        for name, value in values.items():
            if name in self._meta.hooks:
                raise TypeError(
                    f"{self.__class__.__name__}() cannot set '{name}'; it names a hook"
                )
            setattr(self, name, value)
        self.after_initialize()

    def __repr__(self) -> str:
        parts = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"<{self.__class__.__name__} {parts}>"

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in vars(self).items() if not key.startswith("_")}

    # Hook declaration --------------------------------------------------
    @classmethod
    def define_hook(cls, name: str) -> None:
        """
        Declare a hook named ``name`` on this model.

        Installs ``cls.<name>(tag=None, block=None)`` for registering
        callbacks and ``instance.<name>()`` for firing them. Declaring an
        existing hook again clears its callbacks on this class::

            class Document(Model):
                pass

            Document.define_hook("before_publish")
            Document.before_publish(block=lambda doc: doc.reviewed)

            def publish(doc):
                if not doc.before_publish():
                    return False
                ...
        """

        validate_hook_name(name)
        for klass in cls.__mro__:
            if name in klass.__dict__:
                if not isinstance(klass.__dict__[name], HookDescriptor):
                    raise HookConfigurationError(
                        f"Cannot declare hook '{name}' on '{cls.__name__}': "
                        f"'{klass.__name__}.{name}' is already defined"
                    )
                break
        else:
            setattr(cls, name, HookDescriptor(name))
        cls._meta.hooks.declare(name)

        # Existing subclasses already see the descriptor through the MRO.
        for subclass in _all_subclasses(cls):
            registry = subclass._meta.hooks
            if not registry.is_declared(name):
                registry.declare(name)

    # Introspection -----------------------------------------------------
    @classmethod
    def has_hooks(cls, name: str) -> bool:
        return cls._meta.hooks.has_callbacks(name)

    @classmethod
    def hook_blocks(cls, name: str, visit: Callable[[HookBody], Any]) -> None:
        cls._meta.hooks.for_each_callback(name, visit)
