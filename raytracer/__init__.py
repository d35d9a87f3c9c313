"""A recursive ray tracer that renders XML scene descriptions to images."""

__version__ = "0.1.0"