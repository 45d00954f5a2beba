"""Fusion chess — chess where allied pieces merge into composite pieces."""

__version__ = "0.1.0"
