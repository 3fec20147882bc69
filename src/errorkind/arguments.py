"""Positional argument classification for define_error_type().

Arguments may be given in any subset of the canonical order
name, parent, properties, factory. Each slot is identified by the type of
the value that fills it; a value belonging to a later slot that shows up
before an earlier slot's value is an ordering error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

ROOT_NAME = "Error"

NAME, PARENT, PROPERTIES, FACTORY = range(4)
SLOTS = ("name", "parent", "properties", "factory")

_MISSING = object()


def kind_of(value: Any):
    """Return the ErrorKind attached to a class, or None."""
    from errorkind.kinds import ErrorKind

    kind = getattr(value, "__error_kind__", None)
    return kind if isinstance(kind, ErrorKind) else None


def is_name_arg(value: Any) -> bool:
    return isinstance(value, str)


def is_parent_arg(value: Any) -> bool:
    return value is Exception or (isinstance(value, type) and kind_of(value) is not None)


def is_properties_arg(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_factory_arg(value: Any) -> bool:
    if not callable(value) or value is Exception or kind_of(value) is not None:
        return False
    return not (isinstance(value, type) and issubclass(value, BaseException))


def find_arg(
    args: Sequence[Any],
    index: int,
    default: Any,
    predicate: Callable[[Any], bool],
    anti_predicates: Sequence[Callable[[Any], bool]],
) -> Any:
    """Pick the argument filling the slot at canonical position ``index``.

    Raises ArgumentOrderError when a value matching one of
    ``anti_predicates`` (a later slot) precedes the slot's own value.
    A matching value found past ``index`` is ignored.
    """
    anti = -1
    found = -1
    for i, value in enumerate(args):
        if anti == -1 and any(check(value) for check in anti_predicates):
            anti = i
        if found == -1 and predicate(value):
            found = i

    if found != -1 and anti != -1 and anti < found:
        from errorkind.exceptions import ArgumentOrderError

        raise ArgumentOrderError()
    if found == -1 or found > index:
        return default
    return args[found]


_KEYWORD_CHECKS = {
    "name": (is_name_arg, "a str"),
    "parent": (is_parent_arg, "Exception or a defined error kind"),
    "properties": (is_properties_arg, "a mapping"),
    "factory": (is_factory_arg, "a callable that is not an exception class"),
}


@dataclass(frozen=True)
class ResolvedArguments:
    name: str
    parent: type
    properties: dict[str, Any]
    factory: Optional[Callable[..., Any]]


def resolve_arguments(args: Sequence[Any], **explicit: Any) -> ResolvedArguments:
    """Resolve positional ``args`` plus keyword overrides into the four slots.

    Keyword values (``name=``, ``parent=``, ``properties=``, ``factory=``)
    fill their slot directly; a slot given both ways is a TypeError.
    """
    if len(args) > len(SLOTS):
        raise TypeError(
            f"define_error_type() takes at most {len(SLOTS)} positional "
            f"arguments ({len(args)} given)"
        )
    unknown = set(explicit) - set(SLOTS)
    if unknown:
        raise TypeError(f"define_error_type() got unexpected keyword(s): {sorted(unknown)}")

    # parent first: the default name depends on it
    slots = {
        "parent": find_arg(args, PARENT, _MISSING, is_parent_arg,
                           [is_properties_arg, is_factory_arg]),
        "properties": find_arg(args, PROPERTIES, _MISSING, is_properties_arg,
                               [is_factory_arg]),
        "factory": find_arg(args, FACTORY, _MISSING, is_factory_arg, []),
        "name": find_arg(args, NAME, _MISSING, is_name_arg,
                         [is_parent_arg, is_properties_arg, is_factory_arg]),
    }
    for slot, value in explicit.items():
        if value is None:
            continue
        if slots[slot] is not _MISSING:
            raise TypeError(f"define_error_type() got multiple values for {slot!r}")
        check, expected = _KEYWORD_CHECKS[slot]
        if not check(value):
            raise TypeError(f"{slot} must be {expected}, not {value!r}")
        slots[slot] = value

    parent = slots["parent"] if slots["parent"] is not _MISSING else Exception

    name = slots["name"]
    if name is _MISSING:
        parent_kind = kind_of(parent)
        name = parent_kind.name if parent_kind is not None else ROOT_NAME
    properties = slots["properties"]
    factory = slots["factory"]

    return ResolvedArguments(
        name=name,
        parent=parent,
        properties=dict(properties) if properties is not _MISSING else {},
        factory=factory if factory is not _MISSING else None,
    )
