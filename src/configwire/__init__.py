from configwire.container import (
    ContainerBuilder,
    ContainerBuilderProtocol,
    InstanceRegistration,
    ModuleProtocol,
)
from configwire.defaults import DEFAULT_VALUE_TYPES
from configwire.exceptions import (
    ConfigWireError,
    ConfigWireInvalidRegistrationError,
    ConfigWireInvalidResolverError,
)
from configwire.module import ConfigurationModule, register_configuration
from configwire.resolvers import (
    ConfigurationResolver,
    FactoryResolver,
    InstanceResolver,
    SettingsResolver,
)

__all__ = [
    "DEFAULT_VALUE_TYPES",
    "ConfigWireError",
    "ConfigWireInvalidRegistrationError",
    "ConfigWireInvalidResolverError",
    "ConfigurationModule",
    "ConfigurationResolver",
    "ContainerBuilder",
    "ContainerBuilderProtocol",
    "FactoryResolver",
    "InstanceRegistration",
    "InstanceResolver",
    "ModuleProtocol",
    "SettingsResolver",
    "register_configuration",
]
