"""A small ray tracer with motion blur, edge antialiasing and PNG output."""

__version__ = "0.1.0"