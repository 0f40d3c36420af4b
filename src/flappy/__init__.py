"""Flappy Box: a single-screen flap-through-the-pipes arcade game."""

__version__ = "0.1.0"
