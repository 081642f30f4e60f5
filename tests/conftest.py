"""Shared pytest fixtures for configwire tests."""

import pytest
from diwire import Container, DependencyRegistrationPolicy, MissingPolicy

from configwire.container import ContainerBuilder


@pytest.fixture()
def container() -> Container:
    """Strict DIWire container that never autoregisters missing keys."""
    return Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )


@pytest.fixture()
def builder(container: Container) -> ContainerBuilder:
    """Container builder populating the strict ``container`` fixture."""
    return ContainerBuilder(container)
