"""Materializa los segmentos extraídos como páginas dentro del vault."""

from __future__ import annotations

import posixpath
import random
from typing import List, Optional, Protocol, Sequence

from core.config import (
    DISAMBIGUATOR_MAX,
    DISAMBIGUATOR_MIN,
    FOLDER_SUFFIX,
    PAGE_EXTENSION,
)
from core.errors import FileCreationFailure, FolderCreationFailure
from core.logger import log_info
from data.models.document import Page
from data.models.outcomes import AllCreated, PageCreationResult, PartiallyFailed
from host.vault import Vault

__all__ = [
    "FixedFolderNameGenerator",
    "FolderNameGenerator",
    "PageWriter",
    "RandomFolderNameGenerator",
    "page_filename",
]


class FolderNameGenerator(Protocol):
    """Genera el nombre de la carpeta de páginas a partir del título."""

    def generate_unique_name(self, base: str) -> str:
        ...


class RandomFolderNameGenerator:
    """``<base>_paginas(<R>)`` con ``R`` uniforme entre 1000 y 9999.

    No comprueba colisiones: confía en el número aleatorio.
    """

    def __init__(self, rng: Optional[random.Random] = None, *, seed: Optional[int] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def generate_unique_name(self, base: str) -> str:
        disambiguator = self._rng.randint(DISAMBIGUATOR_MIN, DISAMBIGUATOR_MAX)
        return f"{base}{FOLDER_SUFFIX}({disambiguator})"


class FixedFolderNameGenerator:
    """Generador determinista, útil en pruebas."""

    def __init__(self, disambiguator: int) -> None:
        self.disambiguator = disambiguator

    def generate_unique_name(self, base: str) -> str:
        return f"{base}{FOLDER_SUFFIX}({self.disambiguator})"


def page_filename(index: int, base_title: str) -> str:
    """Nombre del archivo para el segmento ``index`` (base cero)."""

    return f"{index + 1}.{base_title}{PAGE_EXTENSION}"


class PageWriter:
    """Crea una carpeta por ejecución y un archivo por segmento."""

    def __init__(
        self,
        vault: Vault,
        name_generator: Optional[FolderNameGenerator] = None,
    ) -> None:
        self.vault = vault
        self.name_generator = name_generator or RandomFolderNameGenerator()

    def allocate_folder(self, base_title: str, sibling_directory: str) -> str:
        """Crea la carpeta de páginas junto a la nota y devuelve su ruta.

        Raises:
            FolderCreationFailure: si el vault no pudo crear la carpeta.
        """

        name = self.name_generator.generate_unique_name(base_title)
        folder = posixpath.join(sibling_directory, name) if sibling_directory else name
        try:
            self.vault.create_folder(folder)
        except (OSError, ValueError) as exc:
            raise FolderCreationFailure(folder, f"No se pudo crear la carpeta {folder}: {exc}") from exc
        log_info(f"📁 Carpeta de páginas: {folder}")
        return folder

    def create_pages(
        self,
        folder: str,
        base_title: str,
        segments: Sequence[str],
    ) -> PageCreationResult:
        """Crea ``<i>.<titulo>.md`` por segmento, en orden.

        Se detiene en el primer fallo y devuelve :class:`PartiallyFailed` con
        las páginas ya creadas; éstas no se eliminan.
        """

        created: List[Page] = []
        for index, segment in enumerate(segments):
            path = f"{folder}/{page_filename(index, base_title)}"
            try:
                self.vault.create(path, segment.strip())
            except (OSError, ValueError) as exc:
                failure = FileCreationFailure(path, f"No se pudo crear la página {path}: {exc}")
                failure.__cause__ = exc
                return PartiallyFailed(created=tuple(created), error=failure)
            created.append(Page(path=path, source_content=segment))

        log_info(f"📄 Páginas creadas: {len(created)}")
        return AllCreated(pages=tuple(created))
