"""A Pong arcade game with fashion-themed power-ups, built on pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]