"""Value types: leaf values are never registered; extend the set when needed."""

from __future__ import annotations

from dataclasses import dataclass, field

from diwire import Container, MissingPolicy
from diwire.exceptions import DIWireDependencyNotRegisteredError

from configwire import DEFAULT_VALUE_TYPES, ContainerBuilder, register_configuration


@dataclass(frozen=True)
class Money:
    amount: int
    currency: str


@dataclass
class BillingConfig:
    plan: str = "pro"
    seats: int = 10
    price: Money = field(default_factory=lambda: Money(amount=49, currency="EUR"))


def is_bound(container: Container, key: type) -> bool:
    try:
        container.resolve(key)
    except DIWireDependencyNotRegisteredError:
        return False
    return True


def strict_builder() -> ContainerBuilder:
    return ContainerBuilder(Container(missing_policy=MissingPolicy.ERROR))


def main() -> None:
    default_builder = strict_builder()
    register_configuration(default_builder, BillingConfig())

    custom_builder = strict_builder()
    register_configuration(
        custom_builder,
        BillingConfig(),
        value_types=(*DEFAULT_VALUE_TYPES, Money),
    )

    print(f"default_money_registered={is_bound(default_builder.build(), Money)}")  # => default_money_registered=True
    print(f"custom_money_registered={is_bound(custom_builder.build(), Money)}")  # => custom_money_registered=False
    print(f"string_root_count={register_configuration(ContainerBuilder(), 'pro')}")  # => string_root_count=0


if __name__ == "__main__":
    main()
