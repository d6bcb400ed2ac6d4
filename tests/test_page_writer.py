"""Pruebas de creación de carpetas y páginas en el vault."""

from __future__ import annotations

import random
import re

import pytest

from core.errors import FileCreationFailure, FolderCreationFailure
from data.models.document import Page
from data.models.outcomes import AllCreated, PartiallyFailed
from data.pages.writer import (
    FixedFolderNameGenerator,
    PageWriter,
    RandomFolderNameGenerator,
    page_filename,
)


class RecordingRandom(random.Random):
    def __init__(self) -> None:
        super().__init__(0)
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return 4321


def test_random_generator_uses_four_digit_range() -> None:
    rng = RecordingRandom()

    name = RandomFolderNameGenerator(rng).generate_unique_name("Doc")

    assert name == "Doc_paginas(4321)"
    assert rng.calls == [(1000, 9999)]


def test_random_generator_names_stay_within_bounds() -> None:
    generator = RandomFolderNameGenerator(seed=3)
    pattern = re.compile(r"^Doc_paginas\((\d+)\)$")

    for _ in range(200):
        match = pattern.match(generator.generate_unique_name("Doc"))
        assert match is not None
        assert 1000 <= int(match.group(1)) <= 9999


def test_seeded_generator_is_deterministic() -> None:
    first = RandomFolderNameGenerator(seed=11).generate_unique_name("Doc")
    second = RandomFolderNameGenerator(seed=11).generate_unique_name("Doc")
    assert first == second


def test_page_filename_is_one_based() -> None:
    assert page_filename(0, "Doc") == "1.Doc.md"
    assert page_filename(9, "Doc") == "10.Doc.md"


def test_allocate_folder_next_to_note(vault, tmp_path) -> None:
    (tmp_path / "Notas").mkdir()
    writer = PageWriter(vault, FixedFolderNameGenerator(1234))

    folder = writer.allocate_folder("Doc", "Notas")

    assert folder == "Notas/Doc_paginas(1234)"
    assert (tmp_path / "Notas" / "Doc_paginas(1234)").is_dir()


def test_allocate_folder_at_vault_root(vault, tmp_path) -> None:
    writer = PageWriter(vault, FixedFolderNameGenerator(1234))

    assert writer.allocate_folder("Doc", "") == "Doc_paginas(1234)"
    assert (tmp_path / "Doc_paginas(1234)").is_dir()


def test_allocate_folder_collision_fails(vault, tmp_path) -> None:
    (tmp_path / "Doc_paginas(1234)").mkdir()
    writer = PageWriter(vault, FixedFolderNameGenerator(1234))

    with pytest.raises(FolderCreationFailure) as excinfo:
        writer.allocate_folder("Doc", "")

    assert excinfo.value.path == "Doc_paginas(1234)"
    assert str(excinfo.value).startswith("No se pudo crear la carpeta Doc_paginas(1234):")
    assert isinstance(excinfo.value.__cause__, FileExistsError)


def test_create_pages_writes_trimmed_content_and_keeps_source(vault, tmp_path) -> None:
    (tmp_path / "F").mkdir()
    writer = PageWriter(vault)

    result = writer.create_pages("F", "Doc", [" Page one ", "Page two"])

    assert isinstance(result, AllCreated)
    assert result.pages == (
        Page("F/1.Doc.md", " Page one "),
        Page("F/2.Doc.md", "Page two"),
    )
    assert (tmp_path / "F" / "1.Doc.md").read_text(encoding="utf-8") == "Page one"
    assert (tmp_path / "F" / "2.Doc.md").read_text(encoding="utf-8") == "Page two"


def test_duplicate_segments_still_get_distinct_paths(vault, tmp_path) -> None:
    (tmp_path / "F").mkdir()

    result = PageWriter(vault).create_pages("F", "Doc", ["mismo", " mismo "])

    assert [page.path for page in result.pages] == ["F/1.Doc.md", "F/2.Doc.md"]


def test_create_pages_stops_at_first_failure(vault, tmp_path) -> None:
    (tmp_path / "F").mkdir()
    (tmp_path / "F" / "2.Doc.md").write_text("ocupado", encoding="utf-8")

    result = PageWriter(vault).create_pages("F", "Doc", ["uno", "dos", "tres"])

    assert isinstance(result, PartiallyFailed)
    assert result.created == (Page("F/1.Doc.md", "uno"),)
    assert isinstance(result.error, FileCreationFailure)
    assert result.error.path == "F/2.Doc.md"
    # Lo creado antes del fallo permanece; no se continúa con el resto.
    assert (tmp_path / "F" / "1.Doc.md").exists()
    assert (tmp_path / "F" / "2.Doc.md").read_text(encoding="utf-8") == "ocupado"
    assert not (tmp_path / "F" / "3.Doc.md").exists()


def test_create_pages_without_segments(vault, tmp_path) -> None:
    (tmp_path / "F").mkdir()

    result = PageWriter(vault).create_pages("F", "Doc", [])

    assert isinstance(result, AllCreated)
    assert result.pages == ()
