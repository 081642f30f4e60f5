from __future__ import annotations

import dataclasses
import functools
import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, get_origin, get_type_hints

from configwire._internal.type_checks import is_named_tuple_type, normalize_declared_type


@dataclass(frozen=True, slots=True)
class ConfigurationMember:
    """Describe one publicly readable member of a configuration object."""

    name: str
    """Attribute name used to read the member value."""
    declared_type: type[Any] | None
    """Runtime class named by the member annotation, or ``None`` when unknown."""
    is_computed: bool = False
    """True for getter-backed members (properties) whose errors must propagate."""


class ConfigurationMembersExtractor:
    """Collect the public members of configuration objects.

    Members are gathered from dataclass fields, attrs fields, named tuple
    fields, class annotations, properties, ``__slots__`` entries, and
    instance attributes, in that order. Each name is reported once and names
    starting with an underscore are ignored.
    """

    def extract(self, configuration: object) -> list[ConfigurationMember]:
        """Return the public members of a configuration object.

        Args:
            configuration: Object whose members are listed.

        """
        configuration_type = type(configuration)
        type_hints = self._resolve_type_hints(configuration_type)

        members: dict[str, ConfigurationMember] = {}
        for name in self._iter_member_names(configuration, configuration_type):
            if name in members or name.startswith("_"):
                continue
            if self._is_class_level_annotation(type_hints.get(name)):
                continue

            getter = self._find_getter(configuration_type, name)
            if getter is not None:
                declared_type = self._resolve_getter_return_type(getter)
            else:
                declared_type = normalize_declared_type(type_hints.get(name))
            members[name] = ConfigurationMember(
                name=name,
                declared_type=declared_type,
                is_computed=getter is not None,
            )
        return list(members.values())

    def _iter_member_names(
        self,
        configuration: object,
        configuration_type: type[Any],
    ) -> Iterator[str]:
        if dataclasses.is_dataclass(configuration_type):
            for dataclass_field in dataclasses.fields(configuration_type):
                yield dataclass_field.name

        for attrs_attribute in getattr(configuration_type, "__attrs_attrs__", ()):
            yield attrs_attribute.name

        if is_named_tuple_type(configuration_type):
            yield from configuration_type._fields

        mro = tuple(reversed(configuration_type.__mro__))
        for klass in mro:
            yield from self._own_annotation_names(klass)

        for klass in mro:
            for name in vars(klass):
                if self._find_getter(configuration_type, name) is not None:
                    yield name

        for klass in mro:
            slots = vars(klass).get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            yield from slots

        instance_attributes = getattr(configuration, "__dict__", None)
        if isinstance(instance_attributes, dict):
            for name in instance_attributes:
                if isinstance(name, str):
                    yield name

    def _find_getter(self, configuration_type: type[Any], name: str) -> Callable[..., Any] | None:
        attribute = inspect.getattr_static(configuration_type, name, None)
        if isinstance(attribute, property):
            return attribute.fget
        if isinstance(attribute, functools.cached_property):
            return attribute.func
        return None

    def _own_annotation_names(self, klass: type[Any]) -> list[str]:
        try:
            return list(inspect.get_annotations(klass))
        except (AttributeError, NameError, TypeError):
            return []

    def _resolve_type_hints(self, configuration_type: type[Any]) -> dict[str, Any]:
        try:
            return get_type_hints(configuration_type)
        except (AttributeError, NameError, TypeError):
            return {}

    def _resolve_getter_return_type(self, getter: Callable[..., Any]) -> type[Any] | None:
        try:
            return_hint = get_type_hints(getter).get("return")
        except (AttributeError, NameError, TypeError):
            return None
        return normalize_declared_type(return_hint)

    def _is_class_level_annotation(self, type_hint: Any) -> bool:
        if isinstance(type_hint, dataclasses.InitVar):
            return True
        return type_hint is ClassVar or get_origin(type_hint) is ClassVar


__all__ = ["ConfigurationMember", "ConfigurationMembersExtractor"]
