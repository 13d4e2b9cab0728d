"""A grid-based snake arcade game: game logic, audio, title menu and window loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]