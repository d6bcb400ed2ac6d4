"""Servicios que implementan los comandos del Unificador."""
