"""Keyboard-driven terminal screens for a guided system installer."""

__version__ = "0.0.1"