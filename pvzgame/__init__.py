"""A lane-defence game with plants, sunshine and zombies, on pygame."""

__version__ = "0.1.0"