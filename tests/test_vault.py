"""Pruebas del vault local y de ``NoteFile``."""

from __future__ import annotations

import pytest

from data.models.document import NoteFile
from host.vault import LocalVault


def test_note_file_exposes_title_and_parent() -> None:
    note = NoteFile("Notas/Sub/Mi nota.md")

    assert note.name == "Mi nota.md"
    assert note.basename == "Mi nota"
    assert note.parent == "Notas/Sub"
    assert NoteFile("Raiz.md").parent == ""


def test_note_file_normalises_separators() -> None:
    assert NoteFile("\\Notas\\Doc.md").path == "Notas/Doc.md"
    with pytest.raises(ValueError):
        NoteFile("  ")


def test_vault_root_must_be_a_directory(tmp_path) -> None:
    with pytest.raises(NotADirectoryError):
        LocalVault(tmp_path / "no-existe")


def test_get_file_returns_none_for_missing_or_folders(vault, tmp_path, write_note) -> None:
    write_note("Notas/Doc.md", "hola")

    assert vault.get_file("Notas/Doc.md") == NoteFile("Notas/Doc.md")
    assert vault.get_file("Notas/Otra.md") is None
    assert vault.get_file("Notas") is None
    assert vault.get_file("../fuera.md") is None


def test_resolve_rejects_paths_outside_vault(vault) -> None:
    with pytest.raises(ValueError):
        vault.resolve("../../etc/passwd")


def test_read_preserves_line_endings(vault, write_note) -> None:
    write_note("Doc.md", "a\r\nb\n")

    assert vault.read(NoteFile("Doc.md")) == "a\r\nb\n"


def test_create_refuses_to_overwrite(vault, write_note) -> None:
    write_note("Doc.md", "original")

    with pytest.raises(FileExistsError):
        vault.create("Doc.md", "nuevo")
    assert vault.read(NoteFile("Doc.md")) == "original"


def test_create_requires_existing_folder(vault) -> None:
    with pytest.raises(FileNotFoundError):
        vault.create("Falta/Doc.md", "texto")


def test_create_folder_refuses_existing(vault, tmp_path) -> None:
    vault.create_folder("Carpeta")
    assert (tmp_path / "Carpeta").is_dir()

    with pytest.raises(FileExistsError):
        vault.create_folder("Carpeta")


def test_modify_requires_existing_file(vault, write_note) -> None:
    write_note("Doc.md", "antes")

    vault.modify(NoteFile("Doc.md"), "después")

    assert vault.read(NoteFile("Doc.md")) == "después"
    with pytest.raises(FileNotFoundError):
        vault.modify(NoteFile("Otra.md"), "x")
