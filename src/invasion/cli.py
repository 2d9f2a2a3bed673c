"""
Command-line entry point.

    invasion --map world.txt --out result.txt -n 10 [--seed 42]

Reads a map file, seeds n aliens, runs the simulation to termination and
writes the surviving cities to the output file.

Exit status: 0 on success, 1 if the aliens got stuck, 2 on bad input.
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from invasion.core.errors import ConfigurationError, StuckPopulationError
from invasion.core.simulation import Simulation, SimulationConfig
from invasion.core.world import WorldConfig
from invasion.io.mapfile import build_world, read_map, validate_alien_count, write_map

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invasion", description="Run an alien invasion simulation.")
    parser.add_argument("--map", required=True, help="File containing the map definition")
    parser.add_argument("--out", required=True, help="Output file to write the resulting map to")
    parser.add_argument("-n", type=int, required=True, help="Number of aliens to use in the simulation")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: fresh entropy)")
    parser.add_argument(
        "--min-moves",
        type=int,
        default=SimulationConfig.min_moves,
        help="Moves every alien must make before the run stops",
    )
    parser.add_argument(
        "--no-initial-fights",
        action="store_true",
        help="Do not resolve cities filled by seeding before the first move",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Also log debug detail (fights are always logged)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger("invasion").setLevel(level)

    try:
        definition = read_map(args.map)
        world = build_world(definition, WorldConfig(), np.random.default_rng(args.seed))
        validate_alien_count(world, args.n)
        world.seed_aliens(args.n)
        simulation = Simulation(
            world,
            SimulationConfig(min_moves=args.min_moves, initial_fights=not args.no_initial_fights),
        )
    except (ConfigurationError, OSError) as exc:
        logger.error("invalid configuration: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("  ALIEN INVASION")
    print("=" * 60)
    print(f"   Map: {args.map} ({world.num_cities} cities, {len(definition.links)} roads)")
    print(f"   Aliens: {world.num_aliens}")

    try:
        stats = simulation.run()
    except StuckPopulationError as exc:
        logger.error("failed to execute alien invasion simulation: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    write_map(world, args.out)

    print(f"   Moves: {stats['total_moves']}")
    print(f"   Destroyed: {stats['destroyed_cities']} cities, {stats['destroyed_aliens']} aliens")
    print(f"   Surviving: {stats['surviving_cities']} cities, {stats['surviving_aliens']} aliens")
    print(f"   Saved: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
