"""Planar triangle meshes for the drawing callbacks."""
