"""Star Pong: a two-paddle Pong demo on pygame and PyOpenGL."""

__version__ = "1.0.0"
