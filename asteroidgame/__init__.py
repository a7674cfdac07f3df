"""An asteroid-style arcade game with configurable window size and speed."""

__version__ = "0.1.0"