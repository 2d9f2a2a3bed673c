"""
World map: the directed graph of cities that aliens wander.

The map stores ONLY the mutable simulation state:
- Cities (vertices) with out-links, in-links and current occupants
- Aliens (agents) with the name of the city they occupy

Every city and alien is owned by the map and referred to elsewhere by name.
Between public operations the following always hold:
- A city's occupants exist as aliens whose location is that city
- No city holds more than max_occupancy aliens, except in the gap between
  move_alien() and the execute_fights() call that immediately follows it
- B in A.out_links  <=>  A in B.in_links
- Destroyed cities and aliens leave no dangling names behind

Directions (north/south/east/west) are validated when a link is built and
then discarded: a link is just "origin can reach destination".

A road from a city back to itself is rejected at construction time: it would
let an alien "move" without leaving its city.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from invasion.core.errors import ConfigurationError, InvariantError, StuckPopulationError
from invasion.core.priority_queue import PriorityQueue
from invasion.core.shuffle import iter_shuffled

logger = logging.getLogger(__name__)


DIRECTIONS = ("north", "south", "east", "west")


@dataclass
class WorldConfig:
    """Capacity limits for a world map."""

    max_occupancy: int = 2  # Aliens in one city before they fight
    max_out_degree: int = 4  # One road per compass direction


@dataclass
class City:
    """
    A vertex of the world graph.

    in_links is redundant with the out_links of every other city. It is kept
    so that destroying a city touches only its neighbours, O(in-degree),
    instead of scanning the whole map.
    """

    name: str
    out_links: list[str] = field(default_factory=list)
    in_links: list[str] = field(default_factory=list)
    occupants: set[str] = field(default_factory=set)

    @property
    def out_degree(self) -> int:
        return len(self.out_links)

    @property
    def in_degree(self) -> int:
        return len(self.in_links)

    def has_priority_over(self, other: City) -> bool:
        """Seeding order: cities with more roads out come first."""
        return self.out_degree > other.out_degree

    def render(self) -> str:
        return (
            f"{{city: {self.name}, "
            f"outLinks: [{', '.join(self.out_links)}], "
            f"inLinks: [{', '.join(self.in_links)}], "
            f"occupants: [{' '.join(sorted(self.occupants))}]}}"
        )


@dataclass
class Alien:
    """A mobile agent. location is the name of the city it occupies."""

    name: str
    location: str


@dataclass(frozen=True)
class FightOutcome:
    """One city destroyed by a fight, with the aliens that died in it."""

    city: str
    aliens: tuple[str, ...]


def normalize_direction(direction: str) -> str:
    """Return the lower-case direction, or raise ConfigurationError if unknown."""
    normalized = direction.strip().lower()
    if normalized not in DIRECTIONS:
        raise ConfigurationError(
            f"invalid direction {direction!r}: expected one of {', '.join(DIRECTIONS)}"
        )
    return normalized


def _remove_name(names: list[str], name: str) -> None:
    """Remove every occurrence of name from names, in place."""
    names[:] = [n for n in names if n != name]


class WorldMap:
    """
    The single mutable root of a simulation.

    All randomness (alien selection, road selection) comes from self.rng,
    so two maps built the same way with equally seeded generators evolve
    identically.

    Not thread-safe: the move/fight loop is strictly sequential.
    """

    def __init__(
        self,
        config: WorldConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config or WorldConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.cities: dict[str, City] = {}
        self.aliens: dict[str, Alien] = {}

        # Aliens minted so far; keeps names unique across seed_aliens() calls
        self._minted = 0

    # ───────────────────────────────────────────────────────────────
    # Queries
    # ───────────────────────────────────────────────────────────────

    @property
    def num_cities(self) -> int:
        return len(self.cities)

    @property
    def num_aliens(self) -> int:
        return len(self.aliens)

    @property
    def capacity(self) -> int:
        """Total number of aliens the map could hold right now."""
        return self.config.max_occupancy * len(self.cities)

    def city_names(self) -> list[str]:
        return list(self.cities)

    def alien_names(self) -> list[str]:
        return list(self.aliens)

    def city(self, name: str) -> City:
        return self.cities[name]

    def iter_cities(self) -> Iterator[City]:
        yield from self.cities.values()

    def free_slots(self) -> int:
        """Number of aliens that can still be placed without exceeding occupancy."""
        max_occupancy = self.config.max_occupancy
        return sum(max(0, max_occupancy - len(c.occupants)) for c in self.cities.values())

    # ───────────────────────────────────────────────────────────────
    # Construction
    # ───────────────────────────────────────────────────────────────

    def add_city(self, name: str) -> City:
        """Return the named city, creating an empty one if it does not exist."""
        city = self.cities.get(name)
        if city is None:
            city = City(name=name)
            self.cities[name] = city
        return city

    def add_link(self, origin: str, direction: str, destination: str) -> None:
        """
        Add a directed road origin -> destination.

        Unknown cities are created. The direction must be one of
        north/south/east/west (any case); it is checked and then dropped.
        Re-adding an existing road is a no-op, so every neighbour appears
        once in out_links and once in the mirrored in_links.

        Raises:
            ConfigurationError: invalid direction, a self-loop, or a new road
                that would exceed max_out_degree. The map is left unchanged.
        """
        normalize_direction(direction)
        if origin == destination:
            raise ConfigurationError(f"city {origin!r} cannot link to itself")

        existing = self.cities.get(origin)
        if existing is not None:
            if destination in existing.out_links:
                return
            if existing.out_degree >= self.config.max_out_degree:
                raise ConfigurationError(
                    f"city {origin!r} already has {existing.out_degree} roads out "
                    f"(max {self.config.max_out_degree})"
                )

        origin_city = self.add_city(origin)
        destination_city = self.add_city(destination)

        origin_city.out_links.append(destination)
        destination_city.in_links.append(origin)

    def seed_aliens(self, n: int) -> list[str]:
        """
        Place n new aliens, most-connected cities first.

        Cities are drained from a priority queue ordered by out-degree; each
        popped city is filled up to max_occupancy before the next one is
        popped. Seeding is deterministic: dead-end cities only receive
        aliens once every city with a road out is full.

        Returns:
            Names of the aliens created, in creation order.

        Raises:
            ConfigurationError: n is negative or larger than the free slots
                left on the map. Nothing is placed.
        """
        if n < 0:
            raise ConfigurationError(f"invalid number of aliens: {n}")
        free = self.free_slots()
        if n > free:
            raise ConfigurationError(
                f"cannot seed {n} aliens: only {free} free slots "
                f"({self.config.max_occupancy} per city, {self.num_cities} cities)"
            )

        queue: PriorityQueue[City] = PriorityQueue()
        for city in self.cities.values():
            queue.push(city)

        created: list[str] = []
        city: City | None = None
        while len(created) < n:
            if city is None or len(city.occupants) >= self.config.max_occupancy:
                city = queue.pop()
                continue
            created.append(self._spawn_alien(city))

        logger.debug("seeded %d aliens across %d cities", n, self.num_cities)
        return created

    def _spawn_alien(self, city: City) -> str:
        self._minted += 1
        alien = Alien(name=f"alien{self._minted}", location=city.name)
        self.aliens[alien.name] = alien
        city.occupants.add(alien.name)
        return alien.name

    # ───────────────────────────────────────────────────────────────
    # Simulation steps
    # ───────────────────────────────────────────────────────────────

    def move_alien(self) -> str:
        """
        Move one alien along one road into a city with room for it.

        Aliens are tried in random order; for each, its roads are tried in a
        fresh random order and the first destination below max_occupancy is
        taken. Exactly one alien moves per call.

        Returns:
            The name of the alien that moved.

        Raises:
            StuckPopulationError: no alien has any legal move (this includes
                an empty map).
        """
        max_occupancy = self.config.max_occupancy

        for alien_name in iter_shuffled(self.aliens, self.rng):
            alien = self.aliens[alien_name]
            current = self.cities[alien.location]

            for link_name in iter_shuffled(current.out_links, self.rng):
                target = self.cities[link_name]
                if len(target.occupants) < max_occupancy:
                    current.occupants.discard(alien.name)
                    target.occupants.add(alien.name)
                    alien.location = target.name
                    return alien.name

        raise StuckPopulationError(
            f"unable to move any alien ({self.num_aliens} aliens, {self.num_cities} cities)"
        )

    def execute_fights(self) -> list[FightOutcome]:
        """
        Destroy every city that has reached max_occupancy, with its occupants.

        All full cities found in one scan are destroyed; the order does not
        matter since each destruction only touches its own neighbours' links.
        A map with no full city is left untouched.
        """
        full = [
            city.name
            for city in self.cities.values()
            if len(city.occupants) >= self.config.max_occupancy
        ]

        outcomes: list[FightOutcome] = []
        for name in full:
            destroyed = self.destroy_city(name)
            logger.info("%s has been destroyed by %s!", name, " and ".join(destroyed))
            outcomes.append(FightOutcome(city=name, aliens=tuple(destroyed)))
        return outcomes

    def destroy_city(self, name: str) -> list[str]:
        """
        Remove a city, its occupants and every road into or out of it.

        Returns:
            Sorted names of the aliens destroyed with the city.

        Raises:
            KeyError: no city with that name.
        """
        city = self.cities.pop(name)

        destroyed = sorted(city.occupants)
        for alien_name in destroyed:
            del self.aliens[alien_name]

        # Roads into the destroyed city
        for neighbour in city.in_links:
            _remove_name(self.cities[neighbour].out_links, name)

        # Roads out of it
        for neighbour in city.out_links:
            _remove_name(self.cities[neighbour].in_links, name)

        return destroyed

    # ───────────────────────────────────────────────────────────────
    # Output / diagnostics
    # ───────────────────────────────────────────────────────────────

    def render(self) -> str:
        """One line per surviving city; empty string once every city is gone."""
        return "\n".join(city.render() for city in self.cities.values())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"WorldMap(cities={self.num_cities}, aliens={self.num_aliens})"

    def check_invariants(self) -> None:
        """
        Verify the graph is internally consistent.

        Raises:
            InvariantError: on the first violation found.
        """
        for city in self.cities.values():
            if len(city.occupants) > self.config.max_occupancy:
                raise InvariantError(f"{city.name}: {len(city.occupants)} occupants")
            if len(set(city.out_links)) != len(city.out_links):
                raise InvariantError(f"{city.name}: duplicate out-links {city.out_links}")

            for neighbour in city.out_links:
                if neighbour not in self.cities:
                    raise InvariantError(f"{city.name}: out-link to missing city {neighbour}")
                if self.cities[neighbour].in_links.count(city.name) != 1:
                    raise InvariantError(f"{neighbour}: in-links do not mirror {city.name}")

            for neighbour in city.in_links:
                if neighbour not in self.cities:
                    raise InvariantError(f"{city.name}: in-link from missing city {neighbour}")
                if city.name not in self.cities[neighbour].out_links:
                    raise InvariantError(f"{neighbour}: out-links do not mirror {city.name}")

            for alien_name in city.occupants:
                alien = self.aliens.get(alien_name)
                if alien is None:
                    raise InvariantError(f"{city.name}: occupant {alien_name} does not exist")
                if alien.location != city.name:
                    raise InvariantError(
                        f"{alien_name}: located in {alien.location} but listed in {city.name}"
                    )

        for alien in self.aliens.values():
            city = self.cities.get(alien.location)
            if city is None or alien.name not in city.occupants:
                raise InvariantError(f"{alien.name}: not an occupant of {alien.location}")
