"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def empty_world(rng):
    """A map with no cities and no aliens."""
    from invasion.core import WorldMap
    return WorldMap(rng=rng)


@pytest.fixture
def full_pair_world(rng):
    """foo <-> bar with both cities seeded to capacity (4 aliens)."""
    from invasion.core import WorldMap
    world = WorldMap(rng=rng)
    world.add_link("foo", "north", "bar")
    world.add_link("bar", "south", "foo")
    world.seed_aliens(4)
    return world


@pytest.fixture
def star_world(rng):
    """foo -> bar, qu-ux, baz; bar -> foo, bee. Five cities, no aliens."""
    from invasion.core import WorldMap
    world = WorldMap(rng=rng)
    world.add_link("foo", "north", "bar")
    world.add_link("foo", "west", "qu-ux")
    world.add_link("foo", "south", "baz")
    world.add_link("bar", "south", "foo")
    world.add_link("bar", "west", "bee")
    return world


def build_ring(n_cities: int, seed: int = 0):
    """Bidirectional ring city0 <-> city1 <-> ... <-> city0."""
    from invasion.core import WorldMap
    world = WorldMap(rng=np.random.default_rng(seed))
    for i in range(n_cities):
        here, there = f"city{i}", f"city{(i + 1) % n_cities}"
        world.add_link(here, "east", there)
        world.add_link(there, "west", here)
    return world


@pytest.fixture
def ring_builder():
    """Factory for ring maps with an explicit seed."""
    return build_ring
