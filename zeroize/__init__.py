"""Overwrite buffers with a fixed pattern, verify the wipe, and demonstrate it on records."""

__version__ = "0.1.0"
__all__ = ["memory", "record", "cli"]