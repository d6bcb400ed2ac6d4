"""Configuración compartida para las pruebas del Unificador."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for imports like `data.pages.splitter`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.logger import get_logger  # noqa: E402
from host.notifier import RecordingNotifier  # noqa: E402
from host.vault import LocalVault  # noqa: E402

# Sin handler de consola: evita escribir en streams que CliRunner cierra.
_logger = get_logger()
for _handler in list(_logger.handlers):
    _logger.removeHandler(_handler)
_logger.addHandler(logging.NullHandler())


@pytest.fixture
def vault(tmp_path) -> LocalVault:
    return LocalVault(tmp_path)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def write_note(tmp_path):
    """Crea una nota dentro del vault temporal y devuelve su ruta relativa."""

    def _write(relative: str, content: str) -> str:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8", newline="")
        return relative

    return _write
