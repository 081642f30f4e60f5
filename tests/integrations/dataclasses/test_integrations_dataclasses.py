"""Tests for registering dataclass configuration graphs."""

from __future__ import annotations

from abc import ABC
from dataclasses import InitVar, dataclass, field

from configwire import ConfigurationModule, ContainerBuilder, InstanceResolver


class IDatabaseSettings(ABC):
    pass


@dataclass(frozen=True)
class PoolSettings:
    size: int = 5
    timeout_seconds: float = 2.5


@dataclass(frozen=True)
class DatabaseSettings(IDatabaseSettings):
    url: str = "sqlite://"
    pool: PoolSettings = field(default_factory=PoolSettings)


@dataclass(slots=True)
class CacheSettings:
    backend: str = "memory"
    pool: PoolSettings | None = None


@dataclass
class AppSettings:
    name: str = "app"
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    tags: list[str] = field(default_factory=list)
    secret_seed: InitVar[str] = "seed"

    def __post_init__(self, secret_seed: str) -> None:
        self.seed_length = len(secret_seed)


def _load(builder: ContainerBuilder, settings: AppSettings) -> None:
    builder.register_module(ConfigurationModule(InstanceResolver(settings)))


def test_nested_dataclasses_are_registered(builder: ContainerBuilder) -> None:
    settings = AppSettings()

    _load(builder, settings)
    container = builder.build()

    assert container.resolve(AppSettings) is settings
    assert container.resolve(IDatabaseSettings) is settings.database
    assert container.resolve(DatabaseSettings) is settings.database
    assert container.resolve(PoolSettings) is settings.database.pool
    assert container.resolve(CacheSettings) is settings.cache


def test_registration_follows_field_order(builder: ContainerBuilder) -> None:
    _load(builder, AppSettings())

    assert [registration.services[-1] for registration in builder.registrations] == [
        DatabaseSettings,
        PoolSettings,
        CacheSettings,
        AppSettings,
    ]


def test_none_field_in_slotted_dataclass_is_skipped(builder: ContainerBuilder) -> None:
    pool = PoolSettings(size=1)
    settings = AppSettings(cache=CacheSettings(pool=pool))

    _load(builder, settings)
    container = builder.build()

    assert container.resolve(CacheSettings).pool is pool
    assert container.resolve(PoolSettings) is pool
