"""
Per-model hook table storing ordered, optionally tagged callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..utils import get_logger
from .errors import HookConfigurationError, UnknownHookError
from .names import validate_hook_name

HookBody = Callable[[Any], Any]


@dataclass(frozen=True)
class MethodCall:
    """
    Deferred callback invoking a zero-argument method of the instance by name.

    The method is looked up when the hook fires, so methods defined or
    overridden after registration are honoured.
    """

    method: str

    def __call__(self, instance: Any) -> Any:
        return getattr(instance, self.method)()


@dataclass(frozen=True)
class CallbackEntry:
    tag: Optional[str]
    body: HookBody


class HookRegistry:
    """
    Maintains the ordered callbacks of every hook declared on one model class.

    Registration is expected to happen while classes are being defined; the
    registry takes no locks, so mutating it while another thread dispatches
    is unsupported.
    """

    def __init__(self, owner: Optional[str] = None, names: Iterable[str] = ()) -> None:
        self.owner = owner
        self._table: Dict[str, List[CallbackEntry]] = {}
        self.logger = get_logger("hooks.registry")
        for name in names:
            self.declare(name)

    def __repr__(self) -> str:
        return f"<HookRegistry owner={self.owner!r} hooks={len(self._table)}>"

    def __contains__(self, name: object) -> bool:
        return name in self._table

    # Declaration -------------------------------------------------------
    def declare(self, name: str) -> bool:
        """
        Create an empty callback sequence for ``name``.

        Redeclaring an existing name resets its sequence. Returns ``True`` when
        the name was not declared before.
        """

        validate_hook_name(name)
        is_new = name not in self._table
        self._table[name] = []
        self.logger.debug(
            "%s hook '%s' on %s",
            "Declared" if is_new else "Reset",
            name,
            self.owner or "registry",
            extra={"hook": name, "model": self.owner},
        )
        return is_new

    def is_declared(self, name: str) -> bool:
        return name in self._table

    def names(self) -> Tuple[str, ...]:
        return tuple(self._table)

    # Introspection -----------------------------------------------------
    def has_callbacks(self, name: str) -> bool:
        return bool(self._sequence(name))

    def iter_callbacks(self, name: str) -> Iterator[HookBody]:
        for entry in self._sequence(name):
            yield entry.body

    def for_each_callback(self, name: str, visit: Callable[[HookBody], Any]) -> None:
        for body in self.iter_callbacks(name):
            visit(body)

    def entries(self, name: str) -> Tuple[Tuple[Optional[str], HookBody], ...]:
        return tuple((entry.tag, entry.body) for entry in self._sequence(name))

    # Mutation ----------------------------------------------------------
    def register(
        self,
        name: str,
        tag: Optional[str] = None,
        body: Optional[HookBody] = None,
    ) -> HookBody:
        """
        Add ``body`` to the hook ``name`` and return the stored callback.

        Without a body, ``tag`` names a zero-argument instance method to call.
        A tag that is already present has its callback replaced in place.
        """

        sequence = self._sequence(name)
        if body is None:
            if tag is None:
                raise HookConfigurationError("No hook callback specified")
            if not isinstance(tag, str):
                raise HookConfigurationError(
                    f"Hook '{name}' tag {tag!r} must be a method name when no callback is given"
                )
            body = MethodCall(tag)
        elif not callable(body):
            raise HookConfigurationError(f"Hook '{name}' callback {body!r} is not callable")

        entry = CallbackEntry(tag=tag, body=body)
        if tag is not None:
            for index, existing in enumerate(sequence):
                if existing.tag == tag:
                    sequence[index] = entry
                    self.logger.debug(
                        "Replaced '%s' callback tagged %r at position %s",
                        name,
                        tag,
                        index,
                        extra={"hook": name, "model": self.owner},
                    )
                    return body
        sequence.append(entry)
        return body

    # Inheritance -------------------------------------------------------
    def copy(self, owner: Optional[str] = None) -> "HookRegistry":
        clone = HookRegistry(owner=owner or self.owner)
        for name, sequence in self._table.items():
            clone._table[name] = list(sequence)
        return clone

    def fresh(self, owner: Optional[str] = None) -> "HookRegistry":
        return HookRegistry(owner=owner or self.owner, names=self._table)

    def _sequence(self, name: str) -> List[CallbackEntry]:
        try:
            return self._table[name]
        except KeyError:
            raise UnknownHookError(name, self.owner) from None
