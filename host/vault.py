"""Acceso al sistema de archivos del editor (el "vault" de notas).

Los servicios sólo dependen del protocolo :class:`Vault`; ``LocalVault`` lo
implementa sobre un directorio local usando rutas POSIX relativas a la raíz,
igual que las rutas internas del editor (``Notas/Doc.md``).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol, Union

from core.config import DEFAULT_ENCODING
from core.logger import log_debug
from data.models.document import NoteFile

PathLike = Union[str, os.PathLike]

__all__ = ["LocalVault", "Vault"]


class Vault(Protocol):
    """Contrato mínimo del sistema de archivos del editor."""

    def get_file(self, path: str) -> Optional[NoteFile]:
        ...

    def read(self, file: NoteFile) -> str:
        ...

    def create(self, path: str, content: str) -> NoteFile:
        ...

    def create_folder(self, path: str) -> None:
        ...

    def modify(self, file: NoteFile, text: str) -> None:
        ...

    def exists(self, path: str) -> bool:
        ...


class LocalVault:
    """Vault respaldado por un directorio del disco."""

    def __init__(self, root: PathLike, *, encoding: str = DEFAULT_ENCODING) -> None:
        self.root = Path(root).resolve()
        self.encoding = encoding
        if not self.root.is_dir():
            raise NotADirectoryError(f"El vault no es un directorio: {self.root}")

    def resolve(self, path: str) -> Path:
        """Traduce una ruta del vault a una ruta absoluta dentro de la raíz."""

        candidate = (self.root / str(path).replace("\\", "/").lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise ValueError(f"La ruta sale del vault: {path}")
        return candidate

    def relative(self, path: PathLike) -> str:
        """Ruta del vault (POSIX) para un archivo del disco."""

        absolute = Path(path).resolve()
        return absolute.relative_to(self.root).as_posix()

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def get_file(self, path: str) -> Optional[NoteFile]:
        try:
            target = self.resolve(path)
        except ValueError:
            return None
        if not target.is_file():
            return None
        return NoteFile(target.relative_to(self.root).as_posix())

    def read(self, file: NoteFile) -> str:
        # newline="" conserva los finales de línea tal cual están en la nota.
        with self.resolve(file.path).open("r", encoding=self.encoding, newline="") as handle:
            return handle.read()

    def create(self, path: str, content: str) -> NoteFile:
        target = self.resolve(path)
        if not target.parent.is_dir():
            raise FileNotFoundError(f"No existe la carpeta de destino: {path}")
        # "x" falla si el archivo ya existe, como el editor.
        with target.open("x", encoding=self.encoding, newline="") as handle:
            handle.write(content)
        log_debug(f"Archivo creado: {path}")
        return NoteFile(path)

    def create_folder(self, path: str) -> None:
        target = self.resolve(path)
        if target.exists():
            raise FileExistsError(f"La carpeta ya existe: {path}")
        target.mkdir(parents=True)
        log_debug(f"Carpeta creada: {path}")

    def modify(self, file: NoteFile, text: str) -> None:
        target = self.resolve(file.path)
        if not target.is_file():
            raise FileNotFoundError(f"No existe el archivo: {file.path}")
        with target.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(text)
        log_debug(f"Archivo modificado: {file.path}")
