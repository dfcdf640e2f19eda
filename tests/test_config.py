# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from pathlib import Path

import pytest

from resource_codegen import config as config_mod
from resource_codegen.config import (
    find_schema,
    load_config,
    normalize_doc,
    validate_against_schema,
)


def _schema_path():
    return Path(config_mod.__file__).parent / config_mod.SCHEMA_FILE


def test_find_schema_next_to_module():
    p = find_schema(None, config_mod.__file__)
    assert p is not None
    assert p.resolve() == _schema_path().resolve()


def test_normalize_doc_scalars_to_lists():
    doc = {
        "resources": "a.txt",
        "names_files": "names.txt",
        "scan": ["res", {"root": "more", "exclude": "*.py"}],
        "language": "Python",
    }
    normalize_doc(doc)
    assert doc["resources"] == ["a.txt"]
    assert doc["names_files"] == ["names.txt"]
    assert doc["scan"] == [{"root": "res"}, {"root": "more", "exclude": ["*.py"]}]
    assert doc["language"] == "python"


def test_schema_rejects_unknown_keys():
    with pytest.raises(ValueError, match="config validation failed at"):
        validate_against_schema({"namespace": "x"}, _schema_path())


def test_schema_reports_nested_path():
    doc = normalize_doc({"scan": [{"root": "res", "style": "flat"}]})
    with pytest.raises(ValueError, match=r"config validation failed at scan->0->style"):
        validate_against_schema(doc, _schema_path())


def test_missing_schema_skips_validation(tmp_path):
    assert validate_against_schema({"anything": 1}, tmp_path / "none.json")
    assert validate_against_schema({"anything": 1}, None)


def test_corrupt_schema_is_runtime_error(tmp_path):
    bad = tmp_path / "bad.schema.json"
    bad.write_text("{ not json", encoding="utf-8")
    with pytest.raises(RuntimeError, match="Failed to load schema"):
        validate_against_schema({}, bad)


def test_load_config_resolves_relative_paths(tmp_path):
    cfg_file = tmp_path / "resgen.yaml"
    cfg_file.write_text(
        "\n".join(
            [
                "root_namespace: MyApp",
                "language: python",
                "output: gen/embedded_resources.py",
                "resources:",
                "  - MyApp.icon.png",
                "names_files: names.txt",
                "scan:",
                "  - root: res",
                "    style: dotted",
                "    exclude: ['*.py']",
            ]
        ),
        encoding="utf-8",
    )
    cfg = load_config(cfg_file)
    base = tmp_path.resolve()
    assert cfg.root_namespace == "MyApp"
    assert cfg.language == "python"
    assert cfg.output == base / "gen" / "embedded_resources.py"
    assert cfg.resources == ["MyApp.icon.png"]
    assert cfg.names_files == [base / "names.txt"]
    (scan,) = cfg.scans
    assert scan.root == base / "res"
    assert scan.style == "dotted"
    assert scan.exclude == ["*.py"]
    assert cfg.source == cfg_file


def test_load_config_empty_document(tmp_path):
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("", encoding="utf-8")
    cfg = load_config(cfg_file)
    assert cfg.root_namespace == ""
    assert cfg.language == "csharp"
    assert cfg.resources == []


def test_load_config_rejects_non_mapping_and_bad_yaml(tmp_path):
    seq = tmp_path / "seq.yaml"
    seq.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config(seq)

    broken = tmp_path / "broken.yaml"
    broken.write_text("resources: [a, b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to parse config"):
        load_config(broken)
