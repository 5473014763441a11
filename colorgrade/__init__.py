"""Bake Kdenlive color grading filters into MLT project files."""

__version__ = "0.1.0"
