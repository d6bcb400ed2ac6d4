"""Modelos de datos del Unificador."""
