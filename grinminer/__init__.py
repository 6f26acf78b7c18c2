"""Cuckatoo cycle finder, siphash keys, solver and stratum types, mining stats and a text table."""

__version__ = "4.0.0"