"""GeoQuest: a geography quiz battle game."""

__version__ = "0.1.0"
