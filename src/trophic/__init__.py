"""trophic: layered resolution of the snake/slug/frog food cycle."""

__version__ = "0.1.0"
