"""Game state, rules, geometry and textures for a 3D arcade shooter against walking robots."""

__version__ = "0.1.0"
__all__ = ["__version__"]