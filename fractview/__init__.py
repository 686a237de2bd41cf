"""Building blocks for a fractal explorer: argument parsing and a pure-Python graphics layer."""

__version__ = "0.1.0"