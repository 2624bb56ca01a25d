"""Geometry, sensor models, statistics and matrix helpers for grid-based laser SLAM."""

__version__ = "0.1.0"