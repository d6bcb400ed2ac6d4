"""Extracción de segmentos delimitados y sustitución por enlaces wiki."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from core.config import (
    CLOSING_DELIMITER,
    OPENING_DELIMITER,
    REFERENCE_CLOSE,
    REFERENCE_OPEN,
)
from core.errors import SubstitutionMismatch
from data.models.document import Page

__all__ = ["TextSplitter"]


class TextSplitter:
    """Procesa el texto dividido por ``{{{ ... }}}`` sin realizar E/S."""

    def __init__(
        self,
        opening: str = OPENING_DELIMITER,
        closing: str = CLOSING_DELIMITER,
    ) -> None:
        if not opening or not closing:
            raise ValueError("Los delimitadores no pueden estar vacíos")
        self.opening = opening
        self.closing = closing

    def extract_segments(self, text: str) -> List[str]:
        """Devuelve el contenido sin recortar de cada segmento, en orden.

        Lo que precede al primer delimitador de apertura nunca es un segmento.
        Un segmento sin cierre se extiende hasta el siguiente delimitador de
        apertura o hasta el final del documento.
        """

        chunks = text.split(self.opening)[1:]
        segments = [chunk.split(self.closing, 1)[0] for chunk in chunks]
        return [segment for segment in segments if segment.strip()]

    def delimited(self, content: str) -> str:
        return f"{self.opening}{content}{self.closing}"

    @staticmethod
    def reference(path: str) -> str:
        return f"{REFERENCE_OPEN}{path}{REFERENCE_CLOSE}"

    def _apply(self, text: str, pages: Iterable[Page]) -> Tuple[str, List[Page]]:
        working = text
        unmatched: List[Page] = []
        for page in pages:
            marker = self.delimited(page.source_content)
            if marker not in working:
                unmatched.append(page)
                continue
            working = working.replace(marker, self.reference(page.path), 1)
        return working, unmatched

    def find_unmatched(self, text: str, pages: Iterable[Page]) -> List[Page]:
        """Páginas cuyo fragmento delimitado no sobrevive a la sustitución."""

        return self._apply(text, pages)[1]

    def substitute_segments(
        self,
        text: str,
        pages: Sequence[Page],
        *,
        strict: bool = False,
    ) -> str:
        """Reemplaza la primera aparición restante de cada segmento por su enlace.

        Los reemplazos son secuenciales y acumulativos.  Si el fragmento exacto
        no existe (segmento sin cierre) el texto queda intacto; con
        ``strict=True`` se lanza :class:`SubstitutionMismatch` en su lugar.
        """

        substituted, unmatched = self._apply(text, pages)
        if strict and unmatched:
            raise SubstitutionMismatch(unmatched)
        return substituted
