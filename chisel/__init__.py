"""Geometry, math, render-state descriptions and small engine-core helpers for a 3D level editor."""

__version__ = "0.1.0"