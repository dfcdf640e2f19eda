# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generator orchestration: collect names, build items, render, write."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from ._version import __version__ as TOOL_VERSION
from .assembler import render
from .config import GenerationConfig
from .dialects import get_dialect
from .discovery import collect_names
from .grouping import build_groups
from .logging import get_logger
from .model import (
    Diagnostic,
    Err,
    GeneratedSource,
    GenerationInput,
    GenerationResult,
    Ok,
    build_items,
)
from .reporting import Reporter


def _generate_source(
    names: List[str],
    root_namespace: str,
    dialect: str,
    traces: Optional[List[Diagnostic]],
) -> Optional[GeneratedSource]:
    if not names:
        return None

    def _trace(msg: str) -> None:
        if traces is not None:
            traces.append(Diagnostic.log(msg))
            get_logger().debug(msg)

    d = get_dialect(dialect)
    _trace(f"RootNamespace = {root_namespace}")
    items = build_items(names, root_namespace)
    for item in items:
        _trace(f"resource = {item.resource_name}")
        _trace(f"identifier = {item.identifier}")
    groups = build_groups(items, root_namespace)
    text = render(items, groups, root_namespace, d)
    return GeneratedSource(hint_name=d.hint_name, text=text)


def generate(
    resource_names: Iterable[str],
    root_namespace: str = "",
    *,
    dialect: str = "csharp",
    debug: bool = False,
) -> GenerationResult:
    """Run one generation pass.

    Returns ``Ok(None)`` for an empty name list, ``Ok(source)`` on success
    and ``Err(diagnostic)`` when anything inside the pass raised. Exceptions
    never escape this function.
    """
    traces: Optional[List[Diagnostic]] = [] if debug else None
    try:
        source = _generate_source(
            list(resource_names), root_namespace or "", dialect, traces
        )
    except Exception as e:
        return Err(Diagnostic.from_exception(e), tuple(traces or ()))
    return Ok(source, tuple(traces or ()))


def generate_input(
    inp: GenerationInput, *, dialect: str = "csharp", debug: bool = False
) -> GenerationResult:
    return generate(
        inp.resource_names, inp.root_namespace, dialect=dialect, debug=debug
    )


def atomic_write(path, content) -> bool:
    """Write ``content`` to ``path`` unless it already holds exactly that.

    Returns True when the file was (re)written. Text that cannot be encoded
    as UTF-8 raises ``UnicodeEncodeError`` before anything touches disk.
    """
    path = str(path)
    data = content.encode("utf-8")
    if os.path.exists(path):
        with open(path, "rb") as f:
            if f.read() == data:
                return False
    tmp = path + ".tmp"
    try:
        with open(tmp, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except OSError as e:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise RuntimeError(f"Transactional write failed: {e}") from e
    return True


def run(
    config: GenerationConfig,
    *,
    dry_run: bool = False,
    debug: bool = False,
    reporter: Reporter | None = None,
) -> int:
    """Drive discovery, generation and output for one config.

    Returns 0 on success (including the empty no-op), 1 when generation
    reported an error diagnostic.
    """
    rep = reporter or Reporter()
    rep.info("ResourceCodeGen %s", TOOL_VERSION)
    if config.source is not None:
        rep.progress("Config: %s", config.source)

    rep.progress("Collecting resource names")
    names = collect_names(
        config.resources,
        config.names_files,
        config.scans,
        root_namespace=config.root_namespace,
    )
    rep.info(
        "Resources: %d (root namespace '%s', language %s)",
        len(names),
        config.root_namespace,
        config.language,
    )

    result = generate(
        names, config.root_namespace, dialect=config.language, debug=debug
    )
    for d in result.diagnostics:
        rep.diagnostic(d)
    if isinstance(result, Err):
        return 1
    if result.source is None:
        rep.info("No resources: nothing to generate")
        return 0

    out = config.output
    if dry_run:
        rep.info("[DRY RUN] Planned outputs:")
        rep.info(
            "    %s: %s",
            result.source.hint_name,
            out if out is not None else "<stdout>",
        )
        rep.info("Generation successful, nothing written")
        return 0
    if out is None:
        sys.stdout.write(result.source.text)
        sys.stdout.flush()
        return 0

    Path(out).parent.mkdir(parents=True, exist_ok=True)
    rep.progress("Writing %s", out)
    if atomic_write(out, result.source.text):
        rep.info("Output updated: %s", out)
    else:
        rep.info("No changes (up to date): %s", out)
    return 0
