"""A flappy-bird style arcade game and a bouncing-ball sandbox on pygame."""

__version__ = "0.1.0"

__all__ = ["__version__"]