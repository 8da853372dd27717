"""Computational geometry: vectors, lines, planes, polygons, a DCEL and monotone partitioning."""

__version__ = "0.1.0"