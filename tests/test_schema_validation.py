from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from scoundrel.paths import get_paths
from scoundrel.services.content import ContentError, ContentService


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_tutorial_loads_sections() -> None:
    paths = get_paths()
    tutorial = ContentService(paths.data_dir, paths.schema_dir).load_tutorial()
    assert tutorial.title == "SCOUNDREL TUTORIAL"
    assert [s.title for s in tutorial.sections] == ["Setup", "Rules", "Combat", "Game End"]
    assert all(s.lines for s in tutorial.sections)


def _content_in(tmp_path: Path, tutorial: object) -> ContentService:
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    shutil.copy(get_paths().schema_dir / "tutorial.schema.json", schema_dir)
    (tmp_path / "tutorial.json").write_text(json.dumps(tutorial), encoding="utf-8")
    return ContentService(tmp_path, schema_dir)


def test_schema_violation_is_reported(tmp_path: Path) -> None:
    content = _content_in(tmp_path, {"title": "X", "sections": [{"title": "Only", "lines": []}]})
    with pytest.raises(ContentError) as exc:
        content.load_tutorial()
    assert "Schema validation failed" in str(exc.value)


def test_missing_and_broken_files(tmp_path: Path) -> None:
    content = _content_in(tmp_path, {})
    (tmp_path / "tutorial.json").unlink()
    with pytest.raises(ContentError, match="Missing content file"):
        content.load_tutorial()

    (tmp_path / "tutorial.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError, match="Invalid JSON"):
        content.load_tutorial()


def test_missing_schema_is_reported(tmp_path: Path) -> None:
    content = _content_in(tmp_path, {"title": "X", "sections": [], "footer": ""})
    (tmp_path / "schemas" / "tutorial.schema.json").unlink()
    with pytest.raises(ContentError, match="Missing content file"):
        content.load_tutorial()
