"""In-process event dispatcher with handlers registered by event name."""

__version__ = "0.1.0"
__all__ = ["dispatcher"]