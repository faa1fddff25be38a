"""cable-router: orthogonal cable routing between equipment nodes."""

__version__ = "0.1.0"
