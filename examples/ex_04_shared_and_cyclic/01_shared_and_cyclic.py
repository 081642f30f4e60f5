"""Shared and cyclic graphs: every object is registered once."""

from __future__ import annotations

from configwire import ContainerBuilder, register_configuration


class Region:
    def __init__(self, name: str) -> None:
        self.name = name
        self.failover: Region | None = None


class Topology:
    def __init__(self, primary: Region, secondary: Region) -> None:
        self.primary = primary
        self.secondary = secondary


def main() -> None:
    west = Region("west")
    east = Region("east")
    west.failover = east
    east.failover = west

    builder = ContainerBuilder()
    registered = register_configuration(builder, Topology(primary=west, secondary=east))
    container = builder.build()

    print(f"registered={registered}")  # => registered=3
    print(f"latest_region={container.resolve(Region).name}")  # => latest_region=east
    order = [registration.instance.__class__.__name__ for registration in builder.registrations]
    print(f"order={','.join(order)}")  # => order=Region,Region,Topology


if __name__ == "__main__":
    main()
