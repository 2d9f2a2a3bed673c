#!/usr/bin/env python3
"""
Demo: Alien Invasion on a Grid

Builds a square grid of cities with a road in every compass direction,
drops aliens onto it and runs the simulation to completion.

The mechanism:
1. Aliens are seeded onto the best-connected cities first
2. One alien moves per step along a random road
3. Two aliens in one city fight: both die and the city is destroyed
4. Roads into a destroyed city vanish, slowly fragmenting the map

Output: output/demo_invasion/result.txt
"""

from pathlib import Path

import numpy as np

from invasion.core import Simulation, SimulationConfig, StuckPopulationError, WorldMap
from invasion.io import write_map


def build_grid(size: int, rng: np.random.Generator) -> WorldMap:
    """size x size grid; every city links to its existing neighbours."""
    world = WorldMap(rng=rng)
    steps = {"north": (0, -1), "south": (0, 1), "east": (1, 0), "west": (-1, 0)}
    for y in range(size):
        for x in range(size):
            for direction, (dx, dy) in steps.items():
                nx, ny = x + dx, y + dy
                if 0 <= nx < size and 0 <= ny < size:
                    world.add_link(f"c{x}_{y}", direction, f"c{nx}_{ny}")
    return world


def main():
    print("=" * 60)
    print("  ALIEN INVASION ON A GRID")
    print("=" * 60)

    grid_size = 8
    n_aliens = 41
    seed = 42

    print("\n1. Building map...")
    world = build_grid(grid_size, np.random.default_rng(seed))
    print(f"   Grid: {grid_size}x{grid_size} ({world.num_cities} cities)")

    print("\n2. Seeding aliens...")
    world.seed_aliens(n_aliens)
    occupied = sum(1 for city in world.iter_cities() if city.occupants)
    print(f"   {world.num_aliens} aliens in {occupied} cities")

    print("\n3. Running simulation...")
    sim = Simulation(world, SimulationConfig(min_moves=1000))
    try:
        stats = sim.run()
    except StuckPopulationError as exc:
        print(f"   Stuck: {exc}")
        stats = sim.stats()
    print(f"   {stats['total_moves']} moves")
    print(f"   Destroyed: {stats['destroyed_cities']} cities, {stats['destroyed_aliens']} aliens")
    print(f"   Surviving: {stats['surviving_cities']} cities, {stats['surviving_aliens']} aliens")

    output_dir = Path("output/demo_invasion")
    output_path = output_dir / "result.txt"
    write_map(world, output_path)
    print(f"\n   Saved: {output_path}")


if __name__ == "__main__":
    main()
