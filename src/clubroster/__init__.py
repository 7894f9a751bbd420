"""Console tools for managing a football roster and a club membership list."""

__version__ = "0.1.0"
