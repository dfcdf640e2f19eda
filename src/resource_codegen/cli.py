# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for ResourceCodeGen.

This small CLI gathers resource names (explicit, from names files, or by
scanning directories), optionally from a YAML config, and emits one
accessor source file for them. The tool is typically invoked from a build
step before compiling or packaging the consumer.
"""

import argparse
from pathlib import Path

from .config import GenerationConfig, ScanSpec, load_config
from .dialects import DIALECTS
from .discovery import NAME_STYLES
from .generator import run
from .logging import configure_logging
from .reporting import make_reporter
from ._version import __version__


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resource-codegen",
        description="Generate typed accessors for embedded resources",
    )
    p.add_argument(
        "--input",
        required=False,
        help="Path to a YAML config describing the generation pass",
    )
    p.add_argument(
        "--root-namespace",
        default=None,
        help="Root namespace stripped from names and used as the container scope",
    )
    p.add_argument(
        "--resource",
        action="append",
        default=[],
        metavar="NAME",
        help="Resource name (repeatable)",
    )
    p.add_argument(
        "--names-file",
        action="append",
        default=[],
        metavar="PATH",
        help="File listing one resource name per line (repeatable)",
    )
    p.add_argument(
        "--scan",
        action="append",
        default=[],
        metavar="DIR",
        help="Directory whose files become resources (repeatable)",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern excluded from --scan (repeatable)",
    )
    p.add_argument(
        "--name-style",
        choices=list(NAME_STYLES),
        default="path",
        help="Names produced by --scan: relative paths or dotted manifest names",
    )
    p.add_argument(
        "--lang",
        choices=list(DIALECTS),
        default=None,
        help="Language of the generated source (default: csharp)",
    )
    p.add_argument(
        "--out",
        required=False,
        help="Output file; the source is written to stdout when omitted",
    )
    p.add_argument(
        "--schema",
        required=False,
        help="Optional path to ResourceCodeGen.schema.json to use for validation",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Collect names and render without writing output files",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Report root namespace, resource and identifier traces",
    )
    # Verbosity and color control
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v: verbose, -vv: debug)",
    )
    p.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease verbosity (can be used multiple times)",
    )
    p.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output mode",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich"],
        default="plain",
        help="Select reporter backend: plain (default) or rich",
    )
    p.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return p


def _merge_args(cfg: GenerationConfig, args: argparse.Namespace) -> GenerationConfig:
    """Apply CLI flags over the config: scalars replace, lists extend."""
    if args.root_namespace is not None:
        cfg.root_namespace = args.root_namespace
    if args.lang is not None:
        cfg.language = args.lang
    if args.out:
        cfg.output = Path(args.out)
    cfg.resources.extend(args.resource)
    cfg.names_files.extend(Path(p) for p in args.names_file)
    cfg.scans.extend(
        ScanSpec(root=Path(d), style=args.name_style, exclude=list(args.exclude))
        for d in args.scan
    )
    return cfg


def main(argv=None) -> int:
    """Parse CLI args and run the generator.

    Args:
        argv: Optional list of arguments (defaults to sys.argv[1:]).

    Returns 0 on success, 1 when generation failed and 2 on invalid input.
    """
    p = build_parser()
    args = p.parse_args(argv)
    if args.version:
        print(f"ResourceCodeGen {__version__}")
        return 0

    # Compute verbosity level: base 1, +1 per -v, -1 per -q, clamp [0..3]
    verbosity = max(0, min(3, 1 + int(args.verbose) - int(args.quiet)))
    rep = make_reporter(args.reporter, verbosity=verbosity, color_mode=args.color)
    configure_logging(rep)

    try:
        cfg = (
            load_config(args.input, args.schema)
            if args.input
            else GenerationConfig()
        )
        cfg = _merge_args(cfg, args)
        return run(cfg, dry_run=args.dry_run, debug=args.debug, reporter=rep)
    except (OSError, ValueError, RuntimeError) as e:
        rep.error("%s", e)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
