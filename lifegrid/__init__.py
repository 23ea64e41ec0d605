"""A pluggable cellular automaton engine with an interactive command line."""

__version__ = "0.1.0"