"""Two-stack sorting: a solver that prints operations, a checker that verifies them, and small C-style helpers."""

__version__ = "1.0.0"