class ConfigWireError(Exception):
    """Represent a base class for all configwire-specific failures.

    Catch this type when you want to handle any configwire error path without
    matching each concrete exception class individually.
    """


class ConfigWireInvalidResolverError(ConfigWireError):
    """Signal a missing or unusable configuration resolver.

    Raised by ``ConfigurationModule`` when it is constructed without a
    resolver, and by ``SettingsResolver`` when the given type is not a
    pydantic-settings model.

    Typical fixes include passing a resolver instance (for example
    ``InstanceResolver(settings)``) and installing ``pydantic-settings`` before
    using ``SettingsResolver``.
    """


class ConfigWireInvalidRegistrationError(ConfigWireError):
    """Signal invalid arguments passed to ``register_instance``.

    Raised by ``ContainerBuilder.register_instance`` when the instance is
    ``None`` or when neither ``as_interfaces`` nor ``as_self`` is requested.
    """
