"""
Map file reading and final-state writing.

The core never touches files; this layer turns a map definition into
(origin, direction, destination) triples and writes the rendered world back out.
"""

from invasion.io.mapfile import (
    MapDefinition,
    build_world,
    parse_map_lines,
    read_map,
    validate_alien_count,
    write_map,
)

__all__ = [
    "MapDefinition",
    "build_world",
    "parse_map_lines",
    "read_map",
    "validate_alien_count",
    "write_map",
]
