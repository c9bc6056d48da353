from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_list(obj: Mapping[str, object], key: str) -> list[object]:
    v = obj.get(key)
    if not isinstance(v, list):
        raise ContentError(f"Expected list for {key}")
    return v


@dataclass(frozen=True)
class TutorialSection:
    title: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Tutorial:
    title: str
    sections: tuple[TutorialSection, ...]
    footer: str


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_tutorial(self) -> Tutorial:
        path = self._data_dir / "tutorial.json"
        schema = _load_json(self._schema_dir / "tutorial.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError("tutorial.json must be an object")

        sections: list[TutorialSection] = []
        for item in _require_list(raw, "sections"):
            if not isinstance(item, dict):
                continue
            lines = [ln for ln in _require_list(item, "lines") if isinstance(ln, str)]
            sections.append(TutorialSection(title=_require_str(item, "title"), lines=tuple(lines)))

        return Tutorial(
            title=_require_str(raw, "title"),
            sections=tuple(sections),
            footer=_require_str(raw, "footer"),
        )

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_tutorial()
