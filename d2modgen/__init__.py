"""Building blocks for Diablo II mod generators: tables, JSON, attributes, colours, logging and time."""

__version__ = "0.1.0"