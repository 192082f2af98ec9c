"""Graph and rendering helpers."""
