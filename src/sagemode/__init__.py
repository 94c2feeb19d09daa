"""Foreground-app timeline layout and usage dashboard."""

__version__ = "0.1.0"
