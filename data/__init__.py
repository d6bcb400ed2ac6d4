"""Modelos y lógica de división de notas."""
