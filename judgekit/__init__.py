"""Solutions to classic programming-contest exercises, as plain functions."""

__version__ = "0.1.0"