"""Configuración, logging y errores compartidos."""
