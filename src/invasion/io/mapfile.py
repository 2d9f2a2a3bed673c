"""
Map definition files.

One city per line: the city name, followed by zero to four roads written
as direction=destination, all separated by spaces:

    Foo north=Bar west=Baz south=Qu-ux
    Bar south=Foo west=Bee

Directions are north, south, east or west in any case. Blank lines are
ignored. Any other deviation, including a road back to the same city or a
fifth road out of one city, is a MapFormatError carrying the line number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import numpy as np

from invasion.core.errors import ConfigurationError, MapFormatError
from invasion.core.world import WorldConfig, WorldMap, normalize_direction


@dataclass
class MapDefinition:
    """A parsed map file: city names in file order plus every road."""

    cities: list[str] = field(default_factory=list)
    links: list[tuple[str, str, str]] = field(default_factory=list)  # (origin, direction, destination)
    link_lines: list[int] = field(default_factory=list)  # 1-based source line of each link


def parse_map_lines(lines: Iterable[str]) -> MapDefinition:
    """
    Parse map definition lines.

    Raises:
        MapFormatError: a road token is not direction=destination, or names
            an unknown direction.
    """
    definition = MapDefinition()

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        origin = tokens[0]
        if "=" in origin:
            raise MapFormatError(f"expected a city name first, got {origin!r}", line_number)
        definition.cities.append(origin)

        for token in tokens[1:]:
            parts = token.split("=")
            if len(parts) != 2 or not parts[0] or not parts[1]:
                raise MapFormatError(f"invalid road {token!r}, expected direction=city", line_number)
            direction, destination = parts
            try:
                direction = normalize_direction(direction)
            except ConfigurationError as exc:
                raise MapFormatError(str(exc), line_number) from exc
            definition.links.append((origin, direction, destination))
            definition.link_lines.append(line_number)

    return definition


def read_map(path: str | Path) -> MapDefinition:
    """Parse a map definition file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        return parse_map_lines(handle)


def build_world(
    definition: MapDefinition,
    config: WorldConfig | None = None,
    rng: np.random.Generator | None = None,
) -> WorldMap:
    """
    Create a WorldMap holding every city and road of a definition.

    Raises:
        MapFormatError: a road the world refuses (self-loop, too many roads
            out of one city), tagged with its source line when known.
    """
    world = WorldMap(config=config, rng=rng)
    for name in definition.cities:
        world.add_city(name)
    for index, (origin, direction, destination) in enumerate(definition.links):
        try:
            world.add_link(origin, direction, destination)
        except ConfigurationError as exc:
            line_number = definition.link_lines[index] if index < len(definition.link_lines) else None
            raise MapFormatError(str(exc), line_number) from exc
    return world


def validate_alien_count(world: WorldMap, n: int) -> None:
    """
    Check that n aliens can be seeded onto world.

    Raises:
        ConfigurationError: n is not positive, or exceeds max_occupancy per city.
    """
    if n <= 0:
        raise ConfigurationError("invalid number of aliens: must be greater than zero")
    if n > world.capacity:
        raise ConfigurationError(
            f"invalid number of aliens: cannot have more than "
            f"{world.config.max_occupancy}x the {world.num_cities} unique cities"
        )


def write_map(world: WorldMap, path: str | Path) -> None:
    """Write one rendered line per surviving city."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for city in world.iter_cities():
            handle.write(city.render() + "\n")
