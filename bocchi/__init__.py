"""A small side-scrolling pygame platformer with CSV tile stages."""

__version__ = "0.1.0"