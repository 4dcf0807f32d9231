"""Stamp sequential numbers into a region of a Spine texture and duplicate its asset files."""

__version__ = "0.1.1"