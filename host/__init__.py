"""Colaboradores del editor: sistema de archivos y avisos."""
