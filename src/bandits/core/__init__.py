"""Core grid types."""
