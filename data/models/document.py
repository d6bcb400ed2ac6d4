# data/models/document.py

from __future__ import annotations

import posixpath
from dataclasses import dataclass


def _normalise_vault_path(value: str) -> str:
    """Convierte rutas a formato POSIX relativo al vault, sin barras extremas."""

    text = str(value).replace("\\", "/").strip()
    text = posixpath.normpath(text) if text else ""
    if text in {".", "/"}:
        return ""
    return text.strip("/")


@dataclass(frozen=True)
class NoteFile:
    """Referencia a una nota del vault (el "archivo activo" del editor).

    Sólo guarda la identidad de la nota; el contenido se lee a través del
    :class:`host.vault.Vault` que la gestiona.
    """

    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _normalise_vault_path(self.path))
        if not self.path:
            raise ValueError("La ruta de la nota no puede estar vacía")

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def basename(self) -> str:
        """Título de la nota: el nombre del archivo sin extensión."""

        stem, _ = posixpath.splitext(self.name)
        return stem

    @property
    def parent(self) -> str:
        """Directorio que contiene la nota ("" si está en la raíz)."""

        return posixpath.dirname(self.path)


@dataclass(frozen=True)
class Page:
    """Página creada a partir de un segmento.

    ``source_content`` conserva el texto sin recortar para poder localizar el
    fragmento delimitado exacto al reescribir el documento original.
    """

    path: str
    source_content: str
