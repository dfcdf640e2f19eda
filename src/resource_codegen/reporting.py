# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Lightweight, colorized reporter with verbosity levels.

Levels (numeric, higher means more verbose):
  0 = quiet (errors and warnings)
  1 = normal (adds info)
  2 = verbose (adds progress details)
  3 = debug (adds debug traces)

Color control:
  mode = "auto" (default): enable colors when stderr is a TTY
  mode = "always": force-enable colors
  mode = "never": disable colors
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.text import Text

from .model import Diagnostic, Severity


def _supports_color(stream) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except Exception:
        return False


@dataclass
class Reporter:
    verbosity: int = 1
    color_mode: str = "auto"  # auto|always|never

    def __post_init__(self):
        self._use_color = self._decide_color()
        # ANSI codes
        self._C_RESET = "\033[0m"
        self._C_DIM = "\033[2m"
        self._C_RED = "\033[31m"
        self._C_GREEN = "\033[32m"
        self._C_YELLOW = "\033[33m"
        self._C_BLUE = "\033[34m"

    def _decide_color(self) -> bool:
        mode = (self.color_mode or "auto").lower()
        if mode == "never":
            return False
        if mode == "always":
            return True
        return _supports_color(sys.stderr)

    # Formatting helpers
    def _wrap(self, s: str, color: str | None) -> str:
        if not self._use_color or not color:
            return s
        return f"{color}{s}{self._C_RESET}"

    def _emit(self, label: str, color: str, s: str) -> None:
        sys.stderr.write(self._wrap(f"[{label}]", color) + f" {s}\n")
        sys.stderr.flush()

    # Public API
    def error(self, msg: str, *args: Any) -> None:
        self._emit("ERROR", self._C_RED, msg % args if args else msg)

    def warn(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 0:  # visible at all levels except <0
            self._emit("WARN", self._C_YELLOW, msg % args if args else msg)

    def info(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 1:
            self._emit("INFO", self._C_GREEN, msg % args if args else msg)

    def progress(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 2:
            self._emit("..", self._C_BLUE, msg % args if args else msg)

    def debug(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 3:
            self._emit("DBG", self._C_DIM, msg % args if args else msg)

    def diagnostic(self, d: Diagnostic) -> None:
        """Surface a generation diagnostic at the matching level."""
        if d.severity is Severity.ERROR:
            self.error("%s", d.format())
            if d.trace:
                self.debug("%s", d.trace.rstrip())
        elif d.severity is Severity.WARNING:
            self.warn("%s", d.format())
        else:
            # INFO diagnostics only exist when tracing is enabled.
            self.info("%s", d.format())


class RichReporter(Reporter):
    """Same levels as :class:`Reporter`, rendered through a rich console."""

    def __post_init__(self):
        super().__post_init__()
        mode = (self.color_mode or "auto").lower()
        self.console = Console(
            stderr=True,
            highlight=False,
            soft_wrap=True,
            force_terminal=True if mode == "always" else None,
            no_color=mode == "never",
        )
        self._C_RED = "bold red"
        self._C_YELLOW = "yellow"
        self._C_GREEN = "green"
        self._C_BLUE = "blue"
        self._C_DIM = "dim"

    def _emit(self, label: str, color: str, s: str) -> None:
        line = Text(f"[{label}]", style=color)
        line.append(f" {s}")
        self.console.print(line)


def make_reporter(
    kind: str = "plain", *, verbosity: int = 1, color_mode: str = "auto"
) -> Reporter:
    if kind == "rich":
        return RichReporter(verbosity=verbosity, color_mode=color_mode)
    return Reporter(verbosity=verbosity, color_mode=color_mode)
