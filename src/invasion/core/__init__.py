"""
Core engine primitives.

This layer knows NOTHING about map files or command lines.
It only knows:
- Cities linked by directed roads, with bounded occupancy
- Aliens that occupy one city at a time
- Moving one alien, and destroying cities where aliens meet
- When a run is over (extinction or every alien has moved enough)

Randomness always flows through an injected numpy Generator.
"""

from invasion.core.errors import (
    ConfigurationError,
    InvariantError,
    InvasionError,
    MapFormatError,
    StuckPopulationError,
)
from invasion.core.priority_queue import PriorityQueue, Prioritized
from invasion.core.shuffle import iter_shuffled, shuffled
from invasion.core.world import (
    DIRECTIONS,
    Alien,
    City,
    FightOutcome,
    WorldConfig,
    WorldMap,
    normalize_direction,
)
from invasion.core.simulation import Simulation, SimulationConfig

__all__ = [
    "ConfigurationError",
    "InvariantError",
    "InvasionError",
    "MapFormatError",
    "StuckPopulationError",
    "PriorityQueue",
    "Prioritized",
    "iter_shuffled",
    "shuffled",
    "DIRECTIONS",
    "Alien",
    "City",
    "FightOutcome",
    "WorldConfig",
    "WorldMap",
    "normalize_direction",
    "Simulation",
    "SimulationConfig",
]
