from __future__ import annotations

import logging
from typing import Any

from configwire._internal.members import ConfigurationMember, ConfigurationMembersExtractor
from configwire._internal.type_checks import (
    implemented_interfaces,
    is_configuration_object,
    is_value_type,
)
from configwire.container import ContainerBuilderProtocol
from configwire.defaults import DEFAULT_VALUE_TYPES
from configwire.exceptions import ConfigWireInvalidResolverError
from configwire.resolvers import ConfigurationResolver

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigurationModule:
    """Register a resolved configuration graph into a container builder.

    On ``load`` the resolver is asked for the configuration root. Every
    configuration section reachable through public members is registered as
    its concrete type and as each interface it implements, then the root is
    registered the same way. Sections are registered before the root so they
    replace any earlier registration of the same keys made by type scanning.

    ``None`` roots, value-typed roots and string roots register nothing.

    Args:
        resolver: Supplier of the configuration root.
        value_types: Types treated as leaf values that are never registered or
            walked. Pass ``(*DEFAULT_VALUE_TYPES, Extra)`` to extend the
            defaults.

    Raises:
        ConfigWireInvalidResolverError: If ``resolver`` is ``None``.

    Examples:
        .. code-block:: python

            builder = ContainerBuilder()
            builder.register_module(ConfigurationModule(InstanceResolver(load_config())))
            container = builder.build()

            storage = container.resolve(IStorage)

    """

    def __init__(
        self,
        resolver: ConfigurationResolver,
        *,
        value_types: tuple[type[Any], ...] = DEFAULT_VALUE_TYPES,
    ) -> None:
        if resolver is None:
            msg = "ConfigurationModule() parameter 'resolver' must not be None."
            raise ConfigWireInvalidResolverError(msg)
        self._resolver = resolver
        self._value_types = value_types

    @property
    def resolver(self) -> ConfigurationResolver:
        """Resolver supplying the configuration root."""
        return self._resolver

    def load(self, builder: ContainerBuilderProtocol) -> None:
        """Resolve the configuration and register its sections into ``builder``.

        Args:
            builder: Container builder receiving ``register_instance`` calls.

        """
        configuration = self._resolver.resolve()
        if configuration is None:
            logger.debug(
                "Configuration resolver for %s returned None; nothing to register",
                _describe_type(self._resolver.config_type),
            )
            return

        registered_count = register_configuration(
            builder,
            configuration,
            value_types=self._value_types,
        )
        logger.info(
            "Registered %d configuration instance(s) for %s",
            registered_count,
            _describe_type(self._resolver.config_type),
        )


def register_configuration(
    builder: ContainerBuilderProtocol,
    configuration: object,
    *,
    value_types: tuple[type[Any], ...] = DEFAULT_VALUE_TYPES,
) -> int:
    """Register an already resolved configuration graph into ``builder``.

    Each distinct object is registered once; objects reached again (shared
    sections or cycles) are neither registered nor walked a second time.

    Args:
        builder: Container builder receiving ``register_instance`` calls.
        configuration: Configuration root; ``None`` and value-typed roots are
            ignored.
        value_types: Types treated as leaf values.

    Returns:
        Number of objects registered, the root included.

    """
    if not is_configuration_object(configuration, value_types):
        return 0

    walker = _ConfigurationGraphWalker(builder=builder, value_types=value_types)
    walker.walk(configuration)
    return walker.registered_count


class _ConfigurationGraphWalker:
    _members_extractor = ConfigurationMembersExtractor()

    def __init__(
        self,
        *,
        builder: ContainerBuilderProtocol,
        value_types: tuple[type[Any], ...],
    ) -> None:
        self._builder = builder
        self._value_types = value_types
        self._visited_ids: set[int] = set()
        self.registered_count = 0

    def walk(self, root: object) -> None:
        root_path = type(root).__qualname__
        self._visited_ids.add(id(root))
        self._register_members(root, path=root_path)
        self._register(root, path=root_path)

    def _register_members(self, configuration: object, *, path: str) -> None:
        for member in self._members_extractor.extract(configuration):
            if member.declared_type is not None and is_value_type(
                member.declared_type,
                self._value_types,
            ):
                continue

            value = self._read_member(configuration, member)
            if not is_configuration_object(value, self._value_types):
                continue
            if id(value) in self._visited_ids:
                logger.debug("Skipping %s.%s: instance already registered", path, member.name)
                continue
            self._visited_ids.add(id(value))

            member_path = f"{path}.{member.name}"
            self._register(value, path=member_path)
            self._register_members(value, path=member_path)

    def _read_member(self, configuration: object, member: ConfigurationMember) -> object:
        if member.is_computed:
            return getattr(configuration, member.name)
        value = getattr(configuration, member.name, _MISSING)
        return None if value is _MISSING else value

    def _register(self, value: object, *, path: str) -> None:
        has_interfaces = bool(implemented_interfaces(type(value)))
        logger.debug(
            "Registering %s (%s, as_interfaces=%s)",
            path,
            type(value).__qualname__,
            has_interfaces,
        )
        self._builder.register_instance(value, as_interfaces=has_interfaces, as_self=True)
        self.registered_count += 1


def _describe_type(config_type: Any) -> str:
    return getattr(config_type, "__qualname__", repr(config_type))


__all__ = ["ConfigurationModule", "register_configuration"]
