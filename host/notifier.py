"""Notificaciones al usuario (equivalente a los avisos del editor)."""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol

__all__ = [
    "ConsoleNotifier",
    "Notifier",
    "NullNotifier",
    "RecordingNotifier",
]


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class NullNotifier:
    """Implementación por defecto silenciosa para facilitar pruebas."""

    def notify(self, message: str) -> None:  # pragma: no cover - trivial
        return


class RecordingNotifier:
    """Guarda los avisos en memoria para inspeccionarlos después."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class ConsoleNotifier:
    """Muestra los avisos en la terminal."""

    def __init__(self, echo: Optional[Callable[[str], None]] = None) -> None:
        if echo is None:
            import typer

            echo = typer.echo
        self._echo = echo

    def notify(self, message: str) -> None:
        self._echo(message)
