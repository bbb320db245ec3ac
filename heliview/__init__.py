"""Z-buffered software rendering of a triangle-mesh model under a scripted camera flight, written to PPM frames."""

__version__ = "0.1.0"
__all__ = ["__version__"]