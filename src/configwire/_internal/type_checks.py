from __future__ import annotations

import abc
import inspect
import types
from typing import Any, Generic, Literal, Protocol, TypeGuard, Union, get_args, get_origin

_NON_INTERFACE_BASES: frozenset[Any] = frozenset({object, abc.ABC, Protocol, Generic})


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_named_tuple_type(candidate: type[Any]) -> bool:
    """Return true when candidate is a ``NamedTuple``/``namedtuple`` class."""
    return issubclass(candidate, tuple) and isinstance(getattr(candidate, "_fields", None), tuple)


def is_value_type(candidate: type[Any], value_types: tuple[type[Any], ...]) -> bool:
    """Return true when instances of candidate are leaf configuration values.

    Args:
        candidate: Runtime class to classify.
        value_types: Types treated as values (see ``DEFAULT_VALUE_TYPES``).

    """
    try:
        if not issubclass(candidate, value_types):
            return False
    except TypeError:
        return False
    return not is_named_tuple_type(candidate)


def is_interface_class(candidate: type[Any]) -> bool:
    """Return true when candidate is a nominal interface a class can be bound to.

    Protocol classes, abstract classes, and classes deriving directly from
    ``abc.ABC`` count as interfaces. Metaclass-only ABCs (for example model
    base classes built on ``ABCMeta``) do not.
    """
    if candidate in _NON_INTERFACE_BASES:
        return False
    if getattr(candidate, "_is_protocol", False):
        return True
    if inspect.isabstract(candidate):
        return True
    return abc.ABC in candidate.__bases__


def implemented_interfaces(concrete_type: type[Any]) -> tuple[type[Any], ...]:
    """Return the interfaces implemented by concrete_type in MRO order.

    The concrete type itself is never part of the result.

    Args:
        concrete_type: Runtime class of a configuration object.

    """
    return tuple(base for base in concrete_type.__mro__[1:] if is_interface_class(base))


def is_configuration_object(value: object, value_types: tuple[type[Any], ...]) -> bool:
    """Return true when value can be registered and walked as a configuration section."""
    if value is None:
        return False
    if inspect.isclass(value) or inspect.ismodule(value) or inspect.isroutine(value):
        return False
    return not is_value_type(type(value), value_types)


def normalize_declared_type(annotation: Any) -> type[Any] | None:
    """Reduce a member annotation to the runtime class it declares.

    ``Optional[X]`` and ``X | None`` unwrap to ``X``; parametrized generics
    reduce to their origin; ``NewType`` aliases reduce to their supertype.
    ``Literal`` annotations reduce to the type of their first value.

    Returns:
        The declared runtime class, or ``None`` when the annotation does not
        name a single class (``Any``, type variables, multi-member unions).

    """
    while hasattr(annotation, "__supertype__"):
        annotation = annotation.__supertype__
    if annotation is Any:
        return None

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        return normalize_declared_type(members[0])
    if origin is Literal:
        literal_values = get_args(annotation)
        return type(literal_values[0]) if literal_values else None
    if origin is not None:
        return origin if is_runtime_class(origin) else None
    if is_runtime_class(annotation):
        return annotation
    return None


__all__ = [
    "implemented_interfaces",
    "is_configuration_object",
    "is_interface_class",
    "is_named_tuple_type",
    "is_runtime_class",
    "is_value_type",
    "normalize_declared_type",
]
