"""Course structure, timing, outlines and exercise extraction for mdBook training material."""

__version__ = "0.1.0"