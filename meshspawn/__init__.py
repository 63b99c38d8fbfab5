"""Procedural triangle-mesh growth with spatial indexes, a camera, an input model and OBJ loading."""

__version__ = "0.1.0"