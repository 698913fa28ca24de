"""Calpay - California State monthly pay period calculator."""

__version__ = "1.3.0"
