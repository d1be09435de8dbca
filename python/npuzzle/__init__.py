"""Optimal N-puzzle solver: IDA* and A* over a shared board model."""

__version__ = "0.1.0"
