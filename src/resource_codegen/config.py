# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generation config: YAML loading, normalization and schema validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

SCHEMA_FILE = "ResourceCodeGen.schema.json"


@dataclass
class ScanSpec:
    root: Path
    style: str = "path"
    exclude: List[str] = field(default_factory=list)


@dataclass
class GenerationConfig:
    root_namespace: str = ""
    language: str = "csharp"
    output: Optional[Path] = None
    resources: List[str] = field(default_factory=list)
    names_files: List[Path] = field(default_factory=list)
    scans: List[ScanSpec] = field(default_factory=list)
    source: Optional[Path] = None


def find_schema(explicit_path: str | None, script_path: str) -> Path | None:
    """Resolve ResourceCodeGen.schema.json according to priority:
    1. explicit_path (if provided)
    2. directory containing script_path

    Returns the Path or None if not found.
    """
    if explicit_path:
        p = Path(explicit_path)
        if p.exists():
            return p
    candidate = Path(script_path).resolve().parent / SCHEMA_FILE
    if candidate.exists():
        return candidate
    return None


def _as_list(val: Any) -> List[Any]:
    if val is None:
        return []
    if isinstance(val, list):
        return val
    return [val]


def normalize_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    """One-pass normalization of doc in-place and return it.

    - resources / names_files / scan -> lists
    - scan entries given as a bare string -> {"root": <string>}
    - scan[].exclude -> list
    - language -> lowercase
    """
    for key in ("resources", "names_files", "scan"):
        if key in doc:
            doc[key] = _as_list(doc.get(key))
    if "scan" in doc:
        doc["scan"] = [
            {"root": s} if isinstance(s, str) else s for s in doc["scan"]
        ]
    for s in doc.get("scan", []) or []:
        if isinstance(s, dict) and "exclude" in s:
            s["exclude"] = _as_list(s.get("exclude"))
    lang = doc.get("language")
    if isinstance(lang, str):
        doc["language"] = lang.lower()
    return doc


def validate_against_schema(
    doc: Dict[str, Any], schema_path: str | Path | None
) -> bool:
    """Validate doc against JSON Schema when available.

    Returns True on success; raises ValueError (schema validation failures) or
    RuntimeError (corrupted schema) otherwise.
    """
    if schema_path is None:
        return True
    p = Path(schema_path)
    if not p.exists():
        return True
    try:
        with p.open("r", encoding="utf-8") as f:
            schema = json.load(f)
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to load schema at {p}: {e}") from e
    try:
        jsonschema.validate(instance=doc, schema=schema)
    except jsonschema.ValidationError as e:
        path = "->".join(str(x) for x in e.path) if e.path else "(root)"
        raise ValueError(
            f"config validation failed at {path}: {e.message}"
        ) from e
    except jsonschema.SchemaError as e:
        raise RuntimeError(f"Invalid schema at {p}: {e.message}") from e
    return True


def build_config(doc: Dict[str, Any], base_dir: Path) -> GenerationConfig:
    def _resolve(p: str) -> Path:
        path = Path(p)
        return path if path.is_absolute() else base_dir / path

    output = doc.get("output")
    return GenerationConfig(
        root_namespace=doc.get("root_namespace") or "",
        language=doc.get("language") or "csharp",
        output=_resolve(output) if output else None,
        resources=list(doc.get("resources") or []),
        names_files=[_resolve(p) for p in doc.get("names_files") or []],
        scans=[
            ScanSpec(
                root=_resolve(s["root"]),
                style=s.get("style", "path"),
                exclude=list(s.get("exclude") or []),
            )
            for s in doc.get("scan") or []
        ],
    )


def load_config(
    path: str | Path, schema_path: str | None = None
) -> GenerationConfig:
    """Load, normalize and validate a YAML config file."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            doc = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse config {p}: {e}") from e
    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ValueError(
            f"config validation failed at (root): expected a mapping in {p}"
        )
    normalize_doc(doc)
    validate_against_schema(doc, find_schema(schema_path, __file__))
    cfg = build_config(doc, p.resolve().parent)
    cfg.source = p
    return cfg
