"""Kingfall — a two-player board game engine played until a king is captured."""

__version__ = "0.1.0"
