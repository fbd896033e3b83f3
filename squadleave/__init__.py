"""SquadLeave: leave scheduling with per-specialty capacity limits."""

__version__ = "1.0.0"
