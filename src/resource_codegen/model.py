# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Typed data model for the resource codegen pipeline."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .sanitizer import sanitize

GENERATION_ERROR_ID = "RESGEN001"
TRACE_ID = "RESGENLOG"


@dataclass(frozen=True)
class ResourceItem:
    logical_path: str
    identifier: str
    resource_name: str

    @classmethod
    def from_name(cls, name: str, root_namespace: str = "") -> "ResourceItem":
        return cls(
            logical_path=name,
            identifier=sanitize(name, root_namespace),
            resource_name=name,
        )


@dataclass(frozen=True)
class GenerationInput:
    resource_names: Tuple[str, ...] = ()
    root_namespace: str = ""


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    id: str
    title: str
    severity: Severity
    message: str
    trace: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Diagnostic":
        trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        return cls(
            id=GENERATION_ERROR_ID,
            title="Exception on generation",
            severity=Severity.ERROR,
            message=f"Exception '{exc}' {type(exc).__name__}",
            trace=trace,
        )

    @classmethod
    def log(cls, message: str) -> "Diagnostic":
        return cls(
            id=TRACE_ID,
            title="Log",
            severity=Severity.INFO,
            message=message,
        )

    def format(self) -> str:
        return f"{self.id}: {self.message}"


@dataclass(frozen=True)
class GeneratedSource:
    hint_name: str
    text: str


@dataclass(frozen=True)
class Ok:
    """Successful pass; ``source`` is None when there was nothing to do."""

    source: Optional[GeneratedSource]
    diagnostics: Tuple[Diagnostic, ...] = field(default_factory=tuple)

    ok = True


@dataclass(frozen=True)
class Err:
    """Failed pass: no output, one error plus any traces recorded first."""

    error: Diagnostic
    traces: Tuple[Diagnostic, ...] = field(default_factory=tuple)

    ok = False

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self.traces + (self.error,)


GenerationResult = Union[Ok, Err]


def build_items(
    names: Iterable[str], root_namespace: str = ""
) -> List[ResourceItem]:
    return [ResourceItem.from_name(n, root_namespace) for n in names]
