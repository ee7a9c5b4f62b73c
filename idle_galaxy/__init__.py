"""Idle Galaxy: procedural star systems with long-term civilization evolution."""

__version__ = "1.0.0"
