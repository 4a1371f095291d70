"""Sevens card game simulator with built-in computer player strategies."""

__version__ = "0.1.0"