"""Extracción de segmentos y creación de páginas."""
