"""Two-stack sorting puzzle: a solver that prints operations, a checker that verifies them, and their helpers."""

__version__ = "1.0.0"