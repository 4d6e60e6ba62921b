"""A grid tank arcade game: board rules, a game clock and a Tk window."""

__version__ = "0.1.0"
__all__ = ["executor", "play", "gui"]