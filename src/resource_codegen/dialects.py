# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Output languages: template sets plus literal/doc escaping rules."""

from __future__ import annotations

import html
import json
import keyword
import re
from dataclasses import dataclass
from typing import Callable, Dict

from . import templates as t

__all__ = [
    "Dialect",
    "CSHARP",
    "PYTHON",
    "DIALECTS",
    "get_dialect",
    "quote",
]

FLAT_ENUM = "EmbeddedResource"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f\x85\u2028\u2029]+")


def quote(value: str) -> str:
    """Double-quoted string literal, valid in both C# and Python."""
    # C# treats U+0085, U+2028 and U+2029 as line terminators.
    return (
        json.dumps(value, ensure_ascii=False)
        .replace("\x85", "\\u0085")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _plain(text: str) -> str:
    return _CONTROL_RE.sub(" ", text)


def _cs_doc(text: str) -> str:
    return html.escape(_plain(text), quote=False)


def _py_doc(text: str) -> str:
    return _plain(text).replace("\\", "\\\\").replace('"', '\\"')


def _cs_identifier(name: str) -> str:
    return name


def _py_identifier(name: str) -> str:
    """Adjust a sanitized identifier to what Python and ``enum`` accept.

    Characters outside Python's identifier set (format characters such as
    U+00AD) become ``_``. Keywords get a trailing ``_``. Names that
    ``enum`` reserves (``_sunder_``) or that class bodies mangle
    (``__private``) get an ``r`` prefix.
    """
    result = "".join(
        ch if (ch if index == 0 else "_" + ch).isidentifier() else "_"
        for index, ch in enumerate(name)
    ) or "_"
    if keyword.iskeyword(result):
        result += "_"
    if result.startswith("__") or (result[0] == "_" and result[-1] == "_"):
        result = "r" + result
    return result


def _cs_namespace(root_namespace: str) -> Dict[str, str]:
    decl = f"namespace {root_namespace};\n" if root_namespace else ""
    return {"namespace_decl": decl}


def _py_namespace(root_namespace: str) -> Dict[str, str]:
    if root_namespace:
        return {
            "package_expr": quote(root_namespace),
            "namespace_doc": f"'{_py_doc(root_namespace)}'",
        }
    return {"package_expr": "__package__", "namespace_doc": "this package"}


@dataclass(frozen=True)
class Dialect:
    name: str
    hint_name: str
    header: str
    item_accessors: str
    resolver_head: str
    resolver_case: str
    resolver_tail: str
    scope_accessors: str
    container_tail: str
    enum_head: str
    enum_member: str
    enum_tail: str
    footer: str
    doc: Callable[[str], str]
    identifier: Callable[[str], str]
    namespace_fields: Callable[[str], Dict[str, str]]

    def enum_type(self, suffix: str = "") -> str:
        return f"{FLAT_ENUM}{suffix}"


CSHARP = Dialect(
    name="csharp",
    hint_name="EmbeddedResources.generated.cs",
    header=t.CS_HEADER,
    item_accessors=t.CS_ITEM_ACCESSORS,
    resolver_head=t.CS_RESOLVER_HEAD,
    resolver_case=t.CS_RESOLVER_CASE,
    resolver_tail=t.CS_RESOLVER_TAIL,
    scope_accessors=t.CS_SCOPE_ACCESSORS,
    container_tail=t.CS_CONTAINER_TAIL,
    enum_head=t.CS_ENUM_HEAD,
    enum_member=t.CS_ENUM_MEMBER,
    enum_tail=t.CS_ENUM_TAIL,
    footer=t.CS_FOOTER,
    doc=_cs_doc,
    identifier=_cs_identifier,
    namespace_fields=_cs_namespace,
)

PYTHON = Dialect(
    name="python",
    hint_name="embedded_resources.py",
    header=t.PY_HEADER,
    item_accessors=t.PY_ITEM_ACCESSORS,
    resolver_head=t.PY_RESOLVER_HEAD,
    resolver_case=t.PY_RESOLVER_CASE,
    resolver_tail=t.PY_RESOLVER_TAIL,
    scope_accessors=t.PY_SCOPE_ACCESSORS,
    container_tail=t.PY_CONTAINER_TAIL,
    enum_head=t.PY_ENUM_HEAD,
    enum_member=t.PY_ENUM_MEMBER,
    enum_tail=t.PY_ENUM_TAIL,
    footer=t.PY_FOOTER,
    doc=_py_doc,
    identifier=_py_identifier,
    namespace_fields=_py_namespace,
)

DIALECTS: Dict[str, Dialect] = {d.name: d for d in (CSHARP, PYTHON)}


def get_dialect(name: str | Dialect) -> Dialect:
    if isinstance(name, Dialect):
        return name
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported language '{name}' (expected one of: {', '.join(DIALECTS)})"
        ) from None
