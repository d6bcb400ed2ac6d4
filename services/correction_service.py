"""Cliente del servidor local de procesamiento de texto.

El servidor expone dos operaciones (``separador`` y ``corrector``) que reciben
``{"text": ...}`` y responden ``{"texto_original": ..., "texto_procesado": ...}``.
El texto procesado reemplaza el contenido de la nota activa.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from core.config import SERVER_URL, SERVICIOS
from core.errors import (
    DocumentReadFailure,
    DocumentWriteFailure,
    EmptyContent,
    MalformedResponse,
    NetworkFailure,
    NoActiveDocument,
    UnificadorError,
    UnknownService,
)
from core.logger import log_error, log_info, log_step, log_warn
from data.models.document import NoteFile
from data.models.outcomes import CorrectionOutcome, RunStatus
from host.notifier import Notifier, NullNotifier
from host.vault import Vault

__all__ = ["CorrectionClient"]


class CorrectionClient:
    """Envía la nota activa al servidor y escribe la respuesta procesada."""

    def __init__(
        self,
        vault: Vault,
        notifier: Optional[Notifier] = None,
        *,
        base_url: str = SERVER_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.vault = vault
        self.notifier = notifier or NullNotifier()
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def endpoint(self, service: str) -> str:
        return f"{self.base_url}/{service}"

    def request(self, text: str, service: str) -> Dict[str, Any]:
        """Hace el POST y valida la respuesta.

        Raises:
            NetworkFailure: URL inválida, error de conexión o estado HTTP >= 400.
            MalformedResponse: cuerpo no JSON o sin ``texto_procesado``.
        """

        url = self.endpoint(service)
        try:
            with httpx.Client(timeout=None, transport=self.transport) as client:
                response = client.post(url, json={"text": text})
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkFailure(
                f"El servidor respondió {exc.response.status_code} en {url}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkFailure(f"No se pudo conectar con {url}: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponse("La respuesta del servidor no es JSON") from exc

        if not isinstance(data, dict) or not isinstance(data.get("texto_procesado"), str):
            raise MalformedResponse(
                "La respuesta del servidor no incluye 'texto_procesado'"
            )
        return data

    def _fail(self, service: str, error: UnificadorError) -> CorrectionOutcome:
        log_error(f"❌ Servicio {service} falló ({error.kind}): {error}")
        self.notifier.notify(f"Error en la petición: {error}")
        return CorrectionOutcome(status=RunStatus.ABORTED, service=service, error=error)

    def process(self, service: str, active_file: Optional[NoteFile]) -> CorrectionOutcome:
        log_step(f"Servicio {service}")

        if service not in SERVICIOS:
            error = UnknownService(
                f"Servicio '{service}' no reconocido. Opciones válidas: {', '.join(SERVICIOS)}"
            )
            return self._fail(service, error)

        if active_file is None:
            error = NoActiveDocument("No hay archivo activo para procesar")
            log_warn(str(error))
            self.notifier.notify(str(error))
            return CorrectionOutcome(status=RunStatus.ABORTED, service=service, error=error)

        try:
            content = self.vault.read(active_file)
        except (OSError, ValueError) as exc:
            error = DocumentReadFailure(f"No se pudo leer {active_file.path}: {exc}")
            error.__cause__ = exc
            return self._fail(service, error)

        if not content.strip():
            error = EmptyContent()
            log_warn(f"{error}: {active_file.path}")
            self.notifier.notify(str(error))
            return CorrectionOutcome(status=RunStatus.SKIPPED, service=service, error=error)

        self.notifier.notify(f"Procesando contenido con servicio: {service}")
        try:
            data = self.request(content, service)
        except (NetworkFailure, MalformedResponse) as error:
            return self._fail(service, error)

        try:
            self.vault.modify(active_file, data["texto_procesado"])
        except (OSError, ValueError) as exc:
            error = DocumentWriteFailure(f"No se pudo escribir {active_file.path}: {exc}")
            error.__cause__ = exc
            return self._fail(service, error)

        log_info(f"✅ Contenido de {active_file.path} procesado con {service}")
        return CorrectionOutcome(status=RunStatus.COMPLETED, service=service, response=data)
