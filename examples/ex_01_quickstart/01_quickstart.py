"""Quickstart: register nested configuration sections and inject them by interface.

The builder fills a DIWire container, so services that depend on configuration
sections are wired from their type hints like any other dependency.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field

from configwire import ConfigurationModule, ContainerBuilder, InstanceResolver


class IStorage(ABC):
    pass


@dataclass
class Storage(IStorage):
    connection_string: str = "UseDevelopmentStorage=true"
    table_name: str = "jobs"


@dataclass
class FirstJob:
    name: str = "first"
    interval_seconds: int = 30


@dataclass
class Config:
    storage: Storage = field(default_factory=Storage)
    first_job: FirstJob = field(default_factory=FirstJob)


class JobRunner:
    def __init__(self, storage: IStorage, job: FirstJob) -> None:
        self.storage = storage
        self.job = job


def main() -> None:
    config = Config()

    builder = ContainerBuilder()
    builder.register_module(ConfigurationModule(InstanceResolver(config)))
    container = builder.build()

    runner = container.resolve(JobRunner)

    print(f"registrations={len(builder.registrations)}")  # => registrations=3
    print(f"storage_is_config_storage={runner.storage is config.storage}")  # => storage_is_config_storage=True
    print(f"job_interval={runner.job.interval_seconds}")  # => job_interval=30


if __name__ == "__main__":
    main()
