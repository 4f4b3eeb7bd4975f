"""Algorithm solutions, small data structures, a GCD calculator and CSV helpers."""

__version__ = "0.1.0"