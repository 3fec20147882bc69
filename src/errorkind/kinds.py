"""Error kinds — exception classes with inherited defaults and initializers.

A kind is an Exception subclass built by define_error_type(). Each kind
carries an ErrorKind descriptor (``cls.__error_kind__``) recording its
default properties, optional initializer and its chain of ancestor kinds.
Constructing an instance merges the chain's defaults root-first, then runs
every initializer from the root down to the leaf.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from errorkind.arguments import kind_of, resolve_arguments
from errorkind.stack import root_initializer, sync_stack

logger = logging.getLogger(__name__)

Initializer = Callable[[BaseException, dict, Any], None]


@dataclass(frozen=True, eq=False)
class ErrorKind:
    name: str
    parent: type
    properties: dict[str, Any]
    initializer: Optional[Initializer] = None
    chain: tuple[ErrorKind, ...] = field(init=False, repr=False)

    def __post_init__(self):
        parent_kind = kind_of(self.parent)
        chain = (self,) + (parent_kind.chain if parent_kind is not None else ())
        object.__setattr__(self, "chain", chain)

    @property
    def root(self) -> ErrorKind:
        return self.chain[-1]

    @property
    def is_root(self) -> bool:
        return len(self.chain) == 1

    @property
    def has_initializer(self) -> bool:
        return self.initializer is not None

    def merge_properties(self, message: Mapping[str, Any]) -> dict[str, Any]:
        """Fold defaults from the root down, then the per-call mapping."""
        merged: dict[str, Any] = {}
        for kind in reversed(self.chain):
            merged.update(kind.properties)
        merged.update(message)
        return merged

    def initialize(self, error: BaseException, message: Any = None, config: Any = None) -> None:
        if isinstance(message, str):
            message = {"message": message}
        if not isinstance(message, Mapping):
            message = {}
        properties = self.merge_properties(message)
        for kind in reversed(self.chain):
            if kind.has_initializer:
                kind.initializer(error, properties, config)


# --- Methods installed on every root kind ---

def _kind_init(self, message=None, config=None):
    self.__error_kind__.initialize(self, message, config)


def _kind_str(self) -> str:
    result = self.__error_kind__.root.name
    if self.code:
        result += f" {self.code}"
    if self.message:
        result += f": {self.message}"
    return result


def _kind_repr(self) -> str:
    return f"{type(self).__name__}({str(self)!r})"


def _get_code(self):
    return vars(self).get("_code")


def _set_code(self, value):
    vars(self)["_code"] = value
    sync_stack(self)


def _get_message(self):
    return vars(self).get("_message", "")


def _set_message(self, value):
    vars(self)["_message"] = value
    sync_stack(self)


def _kind_set_code(self, value):
    """Set ``code`` and return the error, for chaining before a raise."""
    self.code = value
    return self


def _kind_set_message(self, value):
    """Set ``message`` and return the error, for chaining before a raise."""
    self.message = value
    return self


_ROOT_NAMESPACE = {
    "__init__": _kind_init,
    "__str__": _kind_str,
    "__repr__": _kind_repr,
    "code": property(_get_code, _set_code),
    "message": property(_get_message, _set_message),
    "set_code": _kind_set_code,
    "set_message": _kind_set_message,
}


def define_error_type(*args: Any, **kwargs: Any) -> type:
    """Create a new error kind.

    Accepts up to four positional arguments in the order
    ``name, parent, properties, factory``; any of them may be left out.
    The same slots can be given as keywords instead.

    Args:
        name: Name of the kind. Defaults to the parent kind's name, or
            ``"Error"`` for a root kind.
        parent: ``Exception`` (a new root) or another kind to inherit from.
        properties: Default properties for every instance.
        factory: ``factory(error, properties, config)`` called when an
            instance is created. Root kinds without one capture the stack.

    Returns:
        The new exception class.

    Raises:
        ArgumentOrderError: Arguments were supplied out of order.
    """
    resolved = resolve_arguments(args, **kwargs)
    factory = resolved.factory
    if resolved.parent is Exception and factory is None:
        factory = root_initializer

    kind = ErrorKind(
        name=resolved.name,
        parent=resolved.parent,
        properties=resolved.properties,
        initializer=factory,
    )
    namespace = dict(_ROOT_NAMESPACE) if kind.is_root else {}
    namespace.update(
        __error_kind__=kind,
        __qualname__=kind.name,
        __module__=sys._getframe(1).f_globals.get("__name__", __name__),
    )
    cls = type(kind.name, (resolved.parent,), namespace)

    logger.debug(
        "Defined error kind %s (parent=%s, chain depth=%d)",
        kind.name, resolved.parent.__name__, len(kind.chain),
    )
    return cls
