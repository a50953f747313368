"""Poll-based event loop, JSON request routing, command parsing and line-editing helpers."""

__version__ = "1.0.0"