"""Manifest description types and setup checks for project generation."""

__version__ = "0.1.0"
