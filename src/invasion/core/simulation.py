"""
Simulation driver: the move -> fight loop.

Each step:
1. Move exactly one alien (WorldMap.move_alien)
2. Count the move against that alien
3. Resolve fights (WorldMap.execute_fights)

The run stops when either:
- Every alien has been destroyed, or
- Every surviving alien has moved at least min_moves times

This is a liveness bound, not a correctness one. A map that traps every
surviving alien before either condition is met surfaces as
StuckPopulationError from move_alien, and the run fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from invasion.core.errors import ConfigurationError

if TYPE_CHECKING:
    from invasion.core.world import FightOutcome, WorldMap

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    min_moves: int = 10000  # Moves each alien must make before the run may stop
    initial_fights: bool = True  # Resolve cities filled by seeding before the first move


@dataclass
class Simulation:
    """
    Drives a seeded WorldMap until extinction or move exhaustion.

    alien_moves only tracks aliens still below min_moves. An alien is
    dropped once it reaches the threshold or dies in a fight, so the
    termination check never has to look at finished aliens.
    """

    world: "WorldMap"
    config: SimulationConfig = field(default_factory=SimulationConfig)

    # Run counters
    total_moves: int = field(default=0, init=False)
    destroyed_cities: int = field(default=0, init=False)
    destroyed_aliens: int = field(default=0, init=False)

    alien_moves: dict[str, int] = field(default=None, init=False)

    def __post_init__(self):
        if self.config.min_moves < 0:
            raise ConfigurationError(f"min_moves must be >= 0, got {self.config.min_moves}")
        self.alien_moves = {name: 0 for name in self.world.alien_names()}

    def can_continue(self) -> bool:
        """True while aliens remain and at least one is still below min_moves."""
        if self.world.num_aliens == 0:
            return False
        min_moves = self.config.min_moves
        return any(moves < min_moves for moves in self.alien_moves.values())

    def step(self) -> str:
        """
        Move one alien, then resolve fights.

        Returns:
            Name of the alien that moved.

        Raises:
            StuckPopulationError: no alien could move.
        """
        alien_name = self.world.move_alien()
        self.total_moves += 1

        moves = self.alien_moves.get(alien_name)
        if moves is not None:
            moves += 1
            if moves >= self.config.min_moves:
                del self.alien_moves[alien_name]
            else:
                self.alien_moves[alien_name] = moves

        self.resolve_fights()
        return alien_name

    def resolve_fights(self) -> list["FightOutcome"]:
        """Run one fight pass and fold its casualties into the run counters."""
        outcomes = self.world.execute_fights()
        for outcome in outcomes:
            self.destroyed_cities += 1
            self.destroyed_aliens += len(outcome.aliens)
            for alien_name in outcome.aliens:
                self.alien_moves.pop(alien_name, None)
        return outcomes

    def run(self) -> dict:
        """
        Run the simulation to termination.

        Returns:
            Statistics dictionary

        Raises:
            StuckPopulationError: the surviving aliens have no legal move.
        """
        if self.config.initial_fights:
            self.resolve_fights()

        while self.can_continue():
            self.step()

        stats = self.stats()
        logger.info(
            "simulation complete: %d moves, %d cities and %d aliens destroyed",
            stats["total_moves"], stats["destroyed_cities"], stats["destroyed_aliens"],
        )
        return stats

    def stats(self) -> dict:
        return {
            "total_moves": self.total_moves,
            "destroyed_cities": self.destroyed_cities,
            "destroyed_aliens": self.destroyed_aliens,
            "surviving_cities": self.world.num_cities,
            "surviving_aliens": self.world.num_aliens,
        }
