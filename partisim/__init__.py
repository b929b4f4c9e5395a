"""Two-dimensional particle simulation with emitters, force effects and a scene model."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "particle",
    "effects",
    "emitter",
    "emitters",
    "system",
    "randomsystem",
    "scene",
    "demo",
]