"""JSON Schema and markdown reference for the test tree YAML format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel

from casetree.config import CaseConfig, FixtureConfig, MethodConfig, TreeConfig

_REF_PREFIX = "#/$defs/"

# Models documented in the markdown reference, outermost first.
_DOC_SECTIONS: list[tuple[str, type[BaseModel], str]] = [
    ("Top level", TreeConfig, "The root mapping of a declaration file."),
    ("Fixture", FixtureConfig, "One entry under `fixtures`, bound to a class."),
    ("Method", MethodConfig, "One entry under a fixture's `methods`."),
    ("Case", CaseConfig, "One parameter set under a method's `cases`."),
]


def _iter_refs(node: object) -> Iterator[str]:
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            ref = current.get("$ref")
            if isinstance(ref, str) and ref.startswith(_REF_PREFIX):
                yield ref[len(_REF_PREFIX):]
            stack.extend(current.values())
        elif isinstance(current, list):
            stack.extend(current)


def _leaf_first(defs: dict[str, dict]) -> dict[str, dict]:
    """Reorder ``$defs`` so each definition follows the ones it references."""
    ordered: dict[str, dict] = {}
    pending = sorted(defs)
    while pending:
        ready = [
            name
            for name in pending
            if all(dep in ordered or dep == name or dep not in defs for dep in _iter_refs(defs[name]))
        ]
        # Reference cycles: emit the rest alphabetically.
        for name in ready or pending:
            ordered[name] = defs[name]
        pending = [name for name in pending if name not in ordered]
    return ordered


def generate_json_schema() -> dict:
    schema = TreeConfig.model_json_schema(by_alias=True)
    schema["title"] = "casetree test tree"
    if "$defs" in schema:
        schema["$defs"] = _leaf_first(schema["$defs"])
    return schema


def _model_rows(model: type[BaseModel]) -> Iterator[str]:
    for field_name, info in model.model_fields.items():
        key = info.alias or field_name
        requirement = "required" if info.is_required() else f"default `{info.default!r}`"
        yield f"| `{key}` | {requirement} |"


def generate_schema_doc() -> str:
    lines = [
        "# casetree YAML Schema",
        "",
        "Generated from the pydantic models in `casetree.config`.",
        "Unknown keys are rejected at every level.",
    ]
    for title, model, blurb in _DOC_SECTIONS:
        lines += ["", f"## {title}", "", blurb, "", "| Key | Requirement |", "|---|---|"]
        lines.extend(_model_rows(model))
    lines.append("")
    return "\n".join(lines)


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def write_json_schema(path: Path) -> None:
    _write_text(path, json.dumps(generate_json_schema(), indent=2) + "\n")


def write_schema_doc(path: Path) -> None:
    _write_text(path, generate_schema_doc())
