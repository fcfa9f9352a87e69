"""Orion: a line-oriented task tracker (todos, deadlines, events) with JSON persistence."""

__version__ = "0.1.0"
