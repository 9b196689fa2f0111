"""Render parsed IDML layout documents as PDF vector graphics."""

__version__ = "0.1.0"
