"""Exercises on tensor creation, shapes, indexing and matrix operations."""