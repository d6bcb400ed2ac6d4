"""Interfaz de línea de comandos."""
