"""Side-scrolling space-trash shooter: frame engine, input helpers and a text-mode screen."""

__version__ = "0.1.0"