"""Punto de entrada del proyecto Unificador."""

from __future__ import annotations


def main() -> None:
    """Inicia la interfaz de línea de comandos del Unificador."""

    from cli.unificador_cli import app

    app()


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    main()
