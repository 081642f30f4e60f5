from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from diwire import Container

from configwire._internal.type_checks import implemented_interfaces
from configwire.exceptions import ConfigWireInvalidRegistrationError

logger = logging.getLogger(__name__)


@runtime_checkable
class ContainerBuilderProtocol(Protocol):
    """Accept instance registrations while a container is being assembled.

    Any builder exposing ``register_instance`` can be populated by
    ``ConfigurationModule``; ``ContainerBuilder`` binds into a DIWire
    ``Container``.
    """

    def register_instance(
        self,
        instance: Any,
        *,
        as_interfaces: bool,
        as_self: bool,
    ) -> None:
        """Bind a pre-built instance to its interfaces and/or its concrete type."""
        ...


class ModuleProtocol(Protocol):
    """Load a batch of registrations into a container builder."""

    def load(self, builder: ContainerBuilderProtocol) -> None:
        """Register services into ``builder``."""
        ...


@dataclass(frozen=True, slots=True)
class InstanceRegistration:
    """Record one ``register_instance`` call that bound at least one key."""

    instance: Any
    """The instance bound to ``services``."""
    services: tuple[Any, ...]
    """Dependency keys passed to ``add_instance``: interfaces first, then the concrete type."""


class ContainerBuilder:
    """Populate a DIWire container with pre-built configuration instances.

    Every bound key goes through ``Container.add_instance``, so resolution,
    scoping and override rules are DIWire's: re-registering a key replaces the
    previous binding, and the last configuration instance of a type wins.

    Args:
        container: Container receiving the registrations. Defaults to a new
            ``Container()``.

    Examples:
        .. code-block:: python

            builder = ContainerBuilder()
            builder.register_module(ConfigurationModule(InstanceResolver(settings)))
            container = builder.build()

            container.resolve(Settings)

    """

    def __init__(self, container: Container | None = None) -> None:
        self._container = container if container is not None else Container()
        self._registrations: list[InstanceRegistration] = []

    def register_instance(
        self,
        instance: Any,
        *,
        as_interfaces: bool = False,
        as_self: bool = True,
    ) -> None:
        """Register a pre-built instance.

        Args:
            instance: Instance value to return on resolution.
            as_interfaces: Bind the instance to every interface its type
                implements (see ``implemented_interfaces``).
            as_self: Bind the instance to ``type(instance)``.

        Raises:
            ConfigWireInvalidRegistrationError: If ``instance`` is ``None`` or
                both ``as_interfaces`` and ``as_self`` are false.

        Notes:
            A call that asks only for interfaces on a type implementing none
            binds nothing.

        """
        if instance is None:
            msg = "register_instance() parameter 'instance' must not be None."
            raise ConfigWireInvalidRegistrationError(msg)
        if not as_interfaces and not as_self:
            msg = "register_instance() requires 'as_interfaces' or 'as_self' to be true."
            raise ConfigWireInvalidRegistrationError(msg)

        instance_type = type(instance)
        services: list[Any] = []
        if as_interfaces:
            services.extend(implemented_interfaces(instance_type))
        if as_self:
            services.append(instance_type)
        if not services:
            logger.debug(
                "Skipping registration of %s: no interfaces implemented",
                instance_type.__qualname__,
            )
            return

        for service in services:
            self._container.add_instance(instance, provides=service)
        self._registrations.append(InstanceRegistration(instance=instance, services=tuple(services)))
        logger.debug(
            "Registered instance of %s as %s",
            instance_type.__qualname__,
            ", ".join(service.__qualname__ for service in services),
        )

    def register_module(self, module: ModuleProtocol) -> None:
        """Let a module add its registrations to this builder.

        Args:
            module: Module whose ``load`` method receives this builder.

        """
        module.load(self)

    @property
    def registrations(self) -> tuple[InstanceRegistration, ...]:
        """Registrations made through this builder, in call order."""
        return tuple(self._registrations)

    def build(self) -> Container:
        """Return the populated DIWire container."""
        return self._container


__all__ = [
    "ContainerBuilder",
    "ContainerBuilderProtocol",
    "InstanceRegistration",
    "ModuleProtocol",
]
