# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Resource name discovery: explicit lists, names files and directory scans.

Only this module touches the file system on the input side; the generator
core receives a plain list of names.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pathspec import PathSpec

__all__ = [
    "NAME_STYLES",
    "scan_directory",
    "read_names_file",
    "collect_names",
]

log = logging.getLogger(__name__)

NAME_STYLES = ("path", "dotted")


def _load_gitignore(root: Path) -> List[str]:
    gitignore = root / ".gitignore"
    if not gitignore.exists():
        return []
    return [
        line.strip()
        for line in gitignore.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]


def _build_spec(patterns: Sequence[str]) -> Optional[PathSpec]:
    if not patterns:
        return None
    return PathSpec.from_lines("gitwildmatch", patterns)


def _as_name(rel: str, root_namespace: str, style: str) -> str:
    if style == "path":
        return rel
    dotted = rel.replace("/", ".")
    return f"{root_namespace}.{dotted}" if root_namespace else dotted


def scan_directory(
    root: str | Path,
    *,
    root_namespace: str = "",
    style: str = "path",
    exclude: Iterable[str] = (),
) -> List[str]:
    """Return resource names for every file under ``root``.

    Files are visited in sorted order. ``exclude`` holds gitignore-style
    patterns; a ``.gitignore`` at ``root`` is applied as well and is never
    itself returned.

    ``style="path"`` yields POSIX relative paths (``icons/app.png``).
    ``style="dotted"`` yields manifest names (``MyApp.icons.app.png``).
    """
    if style not in NAME_STYLES:
        raise ValueError(
            f"Unsupported name style '{style}' (expected one of: {', '.join(NAME_STYLES)})"
        )
    base = Path(root)
    if not base.is_dir():
        raise FileNotFoundError(f"Scan root does not exist: {base}")

    patterns = list(exclude) + _load_gitignore(base)
    spec = _build_spec(patterns)
    names: List[str] = []
    skipped = 0
    for path in sorted(base.rglob("*")):
        if not path.is_file():
            continue
        rel = path.relative_to(base).as_posix()
        if rel == ".gitignore":
            continue
        if spec is not None and spec.match_file(rel):
            skipped += 1
            continue
        names.append(_as_name(rel, root_namespace, style))
    log.debug(
        "Scanned %s: %d resources (%d excluded)", base, len(names), skipped
    )
    return names


def read_names_file(path: str | Path) -> List[str]:
    """Read one resource name per line; blanks and ``#`` comments skipped."""
    names = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        names.append(stripped)
    log.debug("Read %d resource names from %s", len(names), path)
    return names


def collect_names(
    resources: Iterable[str] = (),
    names_files: Iterable[str | Path] = (),
    scans: Iterable = (),
    *,
    root_namespace: str = "",
) -> List[str]:
    """Concatenate all sources in order; duplicates are kept.

    ``scans`` holds objects with ``root``, ``style`` and ``exclude``
    attributes (see :class:`resource_codegen.config.ScanSpec`).
    """
    names: List[str] = list(resources)
    for f in names_files:
        names.extend(read_names_file(f))
    for s in scans:
        names.extend(
            scan_directory(
                s.root,
                root_namespace=root_namespace,
                style=s.style,
                exclude=s.exclude,
            )
        )
    return names
