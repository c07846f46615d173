"""Unified AI-editor rule management."""

__version__ = "1.1.0"
