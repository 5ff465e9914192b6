"""Colours, transfer functions, running statistics and render status events for volume rendering."""

__version__ = "0.1.0"