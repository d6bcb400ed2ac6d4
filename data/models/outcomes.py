"""Resultados etiquetados devueltos por los servicios del Unificador."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from core.errors import FileCreationFailure, UnificadorError
from data.models.document import Page

__all__ = [
    "AllCreated",
    "CorrectionOutcome",
    "PageCreationResult",
    "PartiallyFailed",
    "RunStatus",
    "SplitOutcome",
]


class RunStatus(str, Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    ABORTED = "aborted"


@dataclass(frozen=True)
class AllCreated:
    """Todas las páginas se crearon correctamente."""

    pages: Tuple[Page, ...]


@dataclass(frozen=True)
class PartiallyFailed:
    """La creación se detuvo en el primer fallo.

    ``created`` contiene las páginas que sí quedaron en disco antes del error;
    no se eliminan.
    """

    created: Tuple[Page, ...]
    error: FileCreationFailure


PageCreationResult = Union[AllCreated, PartiallyFailed]


@dataclass(frozen=True)
class SplitOutcome:
    """Estado final de una ejecución de ``dividir-archivos``."""

    status: RunStatus
    folder: Optional[str] = None
    pages: Tuple[Page, ...] = ()
    unmatched: Tuple[Page, ...] = ()
    error: Optional[UnificadorError] = None

    @property
    def count(self) -> int:
        return len(self.pages)

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "folder": self.folder,
            "count": self.count,
            "pages": [page.path for page in self.pages],
            "unmatched": [page.path for page in self.unmatched],
            "error_kind": self.error_kind,
            "error": str(self.error) if self.error is not None else None,
        }


@dataclass(frozen=True)
class CorrectionOutcome:
    """Estado final de una llamada al servidor de procesamiento."""

    status: RunStatus
    service: str
    error: Optional[UnificadorError] = None
    response: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None
