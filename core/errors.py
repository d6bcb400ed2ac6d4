"""Tipos de error que los servicios devuelven dentro de sus resultados.

Cada clase expone un ``kind`` estable para que las capas superiores (CLI,
pruebas) distingan el fallo sin analizar mensajes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from data.models.document import Page

__all__ = [
    "DocumentReadFailure",
    "DocumentWriteFailure",
    "EmptyContent",
    "FileCreationFailure",
    "FolderCreationFailure",
    "MalformedResponse",
    "NetworkFailure",
    "NoActiveDocument",
    "SubstitutionMismatch",
    "UnificadorError",
    "UnknownService",
]


class UnificadorError(RuntimeError):
    """Base de todos los errores controlados del Unificador."""

    kind = "error"
    default_message = "Error inesperado"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class NoActiveDocument(UnificadorError):
    kind = "no_active_document"
    default_message = "No hay archivo activo"


class EmptyContent(UnificadorError):
    kind = "empty_content"
    default_message = "No hay contenido en el archivo"


class DocumentReadFailure(UnificadorError):
    kind = "document_read_failure"
    default_message = "No se pudo leer el archivo activo"


class DocumentWriteFailure(UnificadorError):
    kind = "document_write_failure"
    default_message = "No se pudo escribir el archivo activo"


class FolderCreationFailure(UnificadorError):
    kind = "folder_creation_failure"
    default_message = "No se pudo crear la carpeta de páginas"

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{self.default_message}: {path}")
        self.path = path


class FileCreationFailure(UnificadorError):
    """Fallo al crear una página concreta; no agrega otros fallos."""

    kind = "file_creation_failure"
    default_message = "No se pudo crear la página"

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{self.default_message}: {path}")
        self.path = path


class NetworkFailure(UnificadorError):
    kind = "network_failure"
    default_message = "No se pudo obtener la respuesta del servidor"


class MalformedResponse(UnificadorError):
    kind = "malformed_response"
    default_message = "La respuesta del servidor no tiene el formato esperado"


class UnknownService(UnificadorError):
    kind = "unknown_service"
    default_message = "Servicio de procesamiento desconocido"


class SubstitutionMismatch(UnificadorError):
    """Alguna página no encontró su texto delimitado en el documento."""

    kind = "substitution_mismatch"
    default_message = "No se encontró el texto original de algunas páginas"

    def __init__(self, pages: Sequence["Page"], message: Optional[str] = None) -> None:
        self.pages: Tuple["Page", ...] = tuple(pages)
        paths = ", ".join(page.path for page in self.pages)
        super().__init__(message or f"{self.default_message}: {paths}")
