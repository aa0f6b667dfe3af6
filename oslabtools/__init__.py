"""Threaded image contrast adjustment and an interactive git fetch helper."""

__version__ = "0.1.0"
__all__ = ["contrast", "contrast_cli", "gitfetch"]