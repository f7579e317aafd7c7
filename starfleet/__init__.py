"""A vertical arcade space shooter with a pygame window and time-stepped game logic."""

__version__ = "0.1.0"