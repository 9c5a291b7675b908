"""Ballz: a brick-breaking arcade game drawn with pygame."""

__version__ = "1.0.0"