"""A layered application framework with events, input polling and an OpenGL renderer."""

__version__ = "0.1.0"