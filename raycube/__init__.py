"""Grid raycasting engine: DDA wall tracing, textured columns, player movement."""

__version__ = "0.1.0"