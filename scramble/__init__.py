"""Word Scramble: root-word letter game engine."""

__version__ = "0.1.0"
