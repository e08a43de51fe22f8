"""Keyword Relay: extract one keyword from user text and translate it to English."""

__version__ = "1.0.0"
