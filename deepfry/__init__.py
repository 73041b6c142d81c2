"""Deepfry images with per-channel bit operations, from Python or the command line."""

__version__ = "0.1.0"
__all__ = ["core", "cli", "preview"]