"""CLI del Unificador: los comandos que el editor expone al usuario.

Comandos disponibles:
- ``separar-contenido``: envía la nota al servicio ``separador``.
- ``dividir-archivos``: divide la nota en páginas según ``{{{ ... }}}``.
- ``corregir-ortografia``: envía la nota al servicio ``corrector``.

La nota indicada hace de "archivo activo" y se interpreta relativa al vault.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

try:
    import typer
except ModuleNotFoundError as exc:  # pragma: no cover - dependencia externa
    raise RuntimeError(
        "La interfaz CLI requiere la librería 'typer'. Instálala con 'pip install typer'."
    ) from exc

from core import config
from core.logger import get_run_logger, log_warn, set_level
from data.models.document import NoteFile
from data.models.outcomes import CorrectionOutcome, RunStatus, SplitOutcome
from data.pages.writer import RandomFolderNameGenerator
from host.notifier import ConsoleNotifier
from host.vault import LocalVault
from services.correction_service import CorrectionClient
from services.split_service import SplitOrchestrator

CLI_VERSION = "0.1.0"
APP_NAME = "Unificador"

LOG_FILE = Path(config.LOG_FILE)

app = typer.Typer(add_completion=False, help="Procesamiento y división de notas.")


def _log_run(**payload: object) -> None:
    """Añade una línea al log de ejecuciones; si no se puede escribir, sólo avisa."""

    try:
        logger = get_run_logger(LOG_FILE)
    except OSError as exc:
        log_warn(f"No se pudo abrir el log de ejecuciones {LOG_FILE}: {exc}")
        return
    try:
        serialised = json.dumps(payload, ensure_ascii=False, default=str)
    except TypeError:
        serialised = str(payload)
    logger.info("run %s", serialised)


def _version_callback(version: bool) -> None:
    if version:
        typer.echo(f"{APP_NAME} CLI v{CLI_VERSION}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Muestra la versión de la CLI y termina.",
        callback=_version_callback,
        is_eager=True,
        is_flag=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Activa los mensajes de depuración."),
) -> None:
    """Punto de entrada principal de la CLI."""
    if verbose:
        set_level(logging.DEBUG)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _open_vault(vault_dir: Path) -> LocalVault:
    try:
        return LocalVault(vault_dir)
    except NotADirectoryError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_active_file(vault: LocalVault, note: str) -> Optional[NoteFile]:
    """Devuelve la nota activa o ``None`` si no existe dentro del vault."""

    candidate = Path(note)
    if candidate.is_absolute():
        try:
            note = vault.relative(candidate)
        except ValueError:
            return None
    return vault.get_file(note)


def _finish(outcome: Union[SplitOutcome, CorrectionOutcome]) -> None:
    if outcome.ok or outcome.status is RunStatus.SKIPPED:
        return
    raise typer.Exit(code=1)


def _run_service(service: str, note: str, vault_dir: Path, server: str) -> None:
    vault = _open_vault(vault_dir)
    client = CorrectionClient(vault, ConsoleNotifier(), base_url=server)
    outcome = client.process(service, _resolve_active_file(vault, note))
    _log_run(
        command=service,
        note=note,
        vault=str(vault.root),
        status=outcome.status.value,
        error_kind=outcome.error_kind,
    )
    _finish(outcome)


@app.command("separar-contenido")
def separar_contenido(
    note: str = typer.Argument(..., help="Ruta de la nota (relativa al vault)."),
    vault_dir: Path = typer.Option(Path("."), "--vault", "-v", help="Carpeta raíz del vault."),
    server: str = typer.Option(config.SERVER_URL, "--servidor", "-s", help="URL del servidor de procesamiento."),
) -> None:
    """Separa el contenido de la nota con el servicio ``separador``."""

    _run_service("separador", note, vault_dir, server)


@app.command("corregir-ortografia")
def corregir_ortografia(
    note: str = typer.Argument(..., help="Ruta de la nota (relativa al vault)."),
    vault_dir: Path = typer.Option(Path("."), "--vault", "-v", help="Carpeta raíz del vault."),
    server: str = typer.Option(config.SERVER_URL, "--servidor", "-s", help="URL del servidor de procesamiento."),
) -> None:
    """Corrige la ortografía de la nota con el servicio ``corrector``."""

    _run_service("corrector", note, vault_dir, server)


@app.command("dividir-archivos")
def dividir_archivos(
    note: str = typer.Argument(..., help="Ruta de la nota (relativa al vault)."),
    vault_dir: Path = typer.Option(Path("."), "--vault", "-v", help="Carpeta raíz del vault."),
    seed: Optional[int] = typer.Option(
        None, "--semilla", help="Semilla para el número aleatorio de la carpeta."
    ),
) -> None:
    """Divide la nota en páginas a partir de los bloques ``{{{ ... }}}``."""

    vault = _open_vault(vault_dir)
    orchestrator = SplitOrchestrator(
        vault,
        ConsoleNotifier(),
        name_generator=RandomFolderNameGenerator(seed=seed),
    )
    outcome = orchestrator.run(_resolve_active_file(vault, note))
    _log_run(command="dividir-archivos", note=note, vault=str(vault.root), **outcome.to_dict())
    _finish(outcome)
