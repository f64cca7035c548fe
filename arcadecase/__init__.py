"""Pong and Flappy Bird arcade games built on pygame."""

__version__ = "0.1.0"