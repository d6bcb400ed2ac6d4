"""Orquesta la división de una nota en páginas enlazadas (``dividir-archivos``).

Flujo de una ejecución:
1. Verificar que hay nota activa.
2. Leer su contenido y derivar el título del nombre de archivo.
3. Extraer los segmentos ``{{{ ... }}}``.
4. Crear la carpeta de páginas y un archivo por segmento.
5. Reescribir la nota sustituyendo cada segmento por su enlace ``[[ruta]]``.
6. Informar al usuario cuántas páginas se crearon y en qué carpeta.

No hay reintentos ni reversión: si la creación de páginas falla a mitad, lo ya
creado queda en disco y la nota no se reescribe.
"""

from __future__ import annotations

import posixpath
from typing import Optional

from core.errors import (
    DocumentReadFailure,
    DocumentWriteFailure,
    FolderCreationFailure,
    NoActiveDocument,
    UnificadorError,
)
from core.logger import log_debug, log_error, log_info, log_step, log_warn
from data.models.document import NoteFile
from data.models.outcomes import PartiallyFailed, RunStatus, SplitOutcome
from data.pages.splitter import TextSplitter
from data.pages.writer import FolderNameGenerator, PageWriter
from host.notifier import Notifier, NullNotifier
from host.vault import Vault

__all__ = ["SplitOrchestrator"]


class SplitOrchestrator:
    """Coordina ``TextSplitter`` y ``PageWriter`` sobre la nota activa."""

    def __init__(
        self,
        vault: Vault,
        notifier: Optional[Notifier] = None,
        *,
        splitter: Optional[TextSplitter] = None,
        writer: Optional[PageWriter] = None,
        name_generator: Optional[FolderNameGenerator] = None,
    ) -> None:
        self.vault = vault
        self.notifier = notifier or NullNotifier()
        self.splitter = splitter or TextSplitter()
        self.writer = writer or PageWriter(vault, name_generator)

    def _abort(self, error: UnificadorError, **fields) -> SplitOutcome:
        log_error(f"❌ División cancelada ({error.kind}): {error}")
        self.notifier.notify(f"Error al crear páginas: {error}")
        return SplitOutcome(status=RunStatus.ABORTED, error=error, **fields)

    def run(self, active_file: Optional[NoteFile]) -> SplitOutcome:
        log_step("Dividir archivos")

        if active_file is None:
            error = NoActiveDocument()
            log_warn(str(error))
            self.notifier.notify(str(error))
            return SplitOutcome(status=RunStatus.ABORTED, error=error)

        try:
            text = self.vault.read(active_file)
        except (OSError, ValueError) as exc:
            error = DocumentReadFailure(f"No se pudo leer {active_file.path}: {exc}")
            error.__cause__ = exc
            return self._abort(error)

        title = active_file.basename
        segments = self.splitter.extract_segments(text)
        log_info(f"🔎 Segmentos encontrados en '{title}': {len(segments)}")

        folder: Optional[str] = None
        pages = ()
        if segments:
            try:
                folder = self.writer.allocate_folder(title, active_file.parent)
            except FolderCreationFailure as error:
                return self._abort(error)

            result = self.writer.create_pages(folder, title, segments)
            if isinstance(result, PartiallyFailed):
                return self._abort(result.error, folder=folder, pages=result.created)
            pages = result.pages

        unmatched = tuple(self.splitter.find_unmatched(text, pages))
        rewritten = self.splitter.substitute_segments(text, pages)

        try:
            self.vault.modify(active_file, rewritten)
        except (OSError, ValueError) as exc:
            error = DocumentWriteFailure(f"No se pudo reescribir {active_file.path}: {exc}")
            error.__cause__ = exc
            return self._abort(error, folder=folder, pages=pages)

        log_debug(f"Texto reescrito:\n{rewritten}")

        if unmatched:
            paths = ", ".join(page.path for page in unmatched)
            log_warn(f"⚠️ Segmentos sin enlace (texto original no encontrado): {paths}")
            self.notifier.notify(
                f"{len(unmatched)} segmentos no se pudieron enlazar en la nota"
            )

        if folder is None:
            self.notifier.notify("No se encontraron segmentos para dividir")
        else:
            self.notifier.notify(
                f'Creadas {len(pages)} páginas en la carpeta "{posixpath.basename(folder)}"'
            )

        log_info(f"✅ División completada: {len(pages)} páginas")
        return SplitOutcome(
            status=RunStatus.COMPLETED,
            folder=folder,
            pages=pages,
            unmatched=unmatched,
        )
