"""
invasion: Alien Invasion Simulator

Aliens are dropped onto a map of cities joined by one-way roads and wander
it one move at a time.

Core concepts:
- A city holds at most two aliens
- When two aliens meet, they fight: the city and both aliens are destroyed
- Destroyed cities take every road into or out of them with them
- The run ends when all aliens are dead or every alien has moved 10000 times

See DESIGN.md for full details.
"""

__version__ = "0.1.0"
