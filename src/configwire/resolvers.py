from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, get_type_hints, runtime_checkable

from configwire._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from configwire._internal.type_checks import normalize_declared_type
from configwire.exceptions import ConfigWireInvalidResolverError

T = TypeVar("T")


@runtime_checkable
class ConfigurationResolver(Protocol):
    """Supply a fully populated configuration object graph.

    ``ConfigurationModule`` calls ``resolve`` once per load. Returning
    ``None`` is allowed and means there is nothing to register.
    """

    @property
    def config_type(self) -> type[Any]:
        """Type of the configuration object produced by ``resolve``."""
        ...

    def resolve(self) -> object | None:
        """Return the configuration root object, or ``None``."""
        ...


class InstanceResolver(Generic[T]):
    """Resolve a configuration object that was built up front.

    Args:
        instance: Configuration root to return; may be ``None``.
        config_type: Declared configuration type. Defaults to
            ``type(instance)``, or ``object`` when ``instance`` is ``None``.

    """

    def __init__(self, instance: T | None, config_type: type[Any] | None = None) -> None:
        self._instance = instance
        if config_type is None:
            config_type = type(instance) if instance is not None else object
        self._config_type = config_type

    @property
    def config_type(self) -> type[Any]:
        return self._config_type

    def resolve(self) -> T | None:
        return self._instance


class FactoryResolver(Generic[T]):
    """Resolve configuration by calling a zero-argument factory.

    The factory runs on every ``resolve`` call; results are not cached.

    Args:
        factory: Callable building the configuration root.
        config_type: Declared configuration type. Defaults to the factory
            itself for classes, else to its return annotation, else ``object``.

    """

    def __init__(
        self,
        factory: Callable[[], T | None],
        config_type: type[Any] | None = None,
    ) -> None:
        self._factory = factory
        self._config_type = (
            config_type if config_type is not None else self._infer_config_type(factory)
        )

    @property
    def config_type(self) -> type[Any]:
        return self._config_type

    def resolve(self) -> T | None:
        return self._factory()

    def _infer_config_type(self, factory: Callable[[], Any]) -> type[Any]:
        if inspect.isclass(factory):
            return factory
        try:
            return_hint = get_type_hints(factory).get("return")
        except (AttributeError, NameError, TypeError):
            return object
        declared_type = normalize_declared_type(return_hint)
        return declared_type if declared_type is not None else object


class SettingsResolver(Generic[T]):
    """Resolve configuration from a ``pydantic_settings.BaseSettings`` model.

    The settings class is instantiated on every ``resolve`` call, so values
    are read from the environment (and any configured sources) at container
    build time.

    Args:
        settings_type: ``BaseSettings`` subclass to instantiate.

    Raises:
        ConfigWireInvalidResolverError: If ``settings_type`` is not a
            pydantic-settings model or ``pydantic-settings`` is not installed.

    """

    def __init__(self, settings_type: type[T]) -> None:
        if not is_pydantic_settings_subclass(settings_type):
            msg = (
                f"SettingsResolver() requires a pydantic_settings.BaseSettings subclass, "
                f"got {settings_type!r}. Install 'pydantic-settings' if it is missing."
            )
            raise ConfigWireInvalidResolverError(msg)
        self._settings_type = settings_type

    @property
    def config_type(self) -> type[T]:
        return self._settings_type

    def resolve(self) -> T:
        return self._settings_type()


__all__ = [
    "ConfigurationResolver",
    "FactoryResolver",
    "InstanceResolver",
    "SettingsResolver",
]
