"""Tests for custom exception hierarchy."""

import pytest

from configwire import (
    ConfigurationModule,
    ConfigWireError,
    ConfigWireInvalidRegistrationError,
    ConfigWireInvalidResolverError,
    ContainerBuilder,
)


class _Unregistered:
    pass


@pytest.mark.parametrize(
    "exception_type",
    [
            ConfigWireInvalidRegistrationError,
        ConfigWireInvalidResolverError,
    ],
)
def test_every_error_derives_from_configwire_error(exception_type: type[Exception]) -> None:
    assert issubclass(exception_type, ConfigWireError)


class TestConfigWireInvalidResolverError:
    def test_raised_for_missing_resolver(self) -> None:
        with pytest.raises(ConfigWireInvalidResolverError, match="'resolver' must not be None"):
            ConfigurationModule(None)  # type: ignore[arg-type]

    def test_caught_as_base_error(self) -> None:
        with pytest.raises(ConfigWireError):
            ConfigurationModule(None)  # type: ignore[arg-type]


class TestConfigWireInvalidRegistrationError:
    def test_raised_for_none_instance(self) -> None:
        with pytest.raises(ConfigWireInvalidRegistrationError, match="must not be None"):
            ContainerBuilder().register_instance(None)

    def test_raised_when_no_binding_requested(self) -> None:
        builder = ContainerBuilder()

        with pytest.raises(ConfigWireInvalidRegistrationError, match="'as_interfaces' or 'as_self'"):
            builder.register_instance(_Unregistered(), as_interfaces=False, as_self=False)

