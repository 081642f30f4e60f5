"""Resolvers: supply configuration up front, lazily, or not at all."""

from __future__ import annotations

from configwire import ConfigurationModule, ContainerBuilder, FactoryResolver, InstanceResolver


class Endpoint:
    def __init__(self, url: str) -> None:
        self.url = url


class ApiConfig:
    def __init__(self) -> None:
        self.endpoint = Endpoint("https://api.example.com")


def load_api_config() -> ApiConfig:
    return ApiConfig()


def main() -> None:
    factory_resolver = FactoryResolver(load_api_config)
    builder = ContainerBuilder()
    builder.register_module(ConfigurationModule(factory_resolver))

    print(f"config_type={factory_resolver.config_type.__name__}")  # => config_type=ApiConfig
    print(f"endpoint={builder.build().resolve(Endpoint).url}")  # => endpoint=https://api.example.com

    empty_builder = ContainerBuilder()
    empty_builder.register_module(
        ConfigurationModule(InstanceResolver(None, config_type=ApiConfig)),
    )

    print(f"missing_config_registrations={len(empty_builder.registrations)}")  # => missing_config_registrations=0


if __name__ == "__main__":
    main()
