# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Render resource items and groups into accessor source text.

Output order is fixed:

  1. container header (scoped to the root namespace)
  2. per-item stream/reader accessors, in input order
  3. flat resolver (enumerant -> resource name)
  4. flat stream/reader accessors
  5. per-group resolver and accessors, in group order
  6. container close, then the flat enumeration
  7. one enumeration per group

The result depends only on the arguments, so unchanged inputs always
produce byte-identical text.
"""

from __future__ import annotations

from typing import List, Sequence

from ._version import __version__ as TOOL_VERSION
from .dialects import Dialect, get_dialect, quote
from .grouping import Group, file_segment, group_identifier
from .model import ResourceItem

__all__ = ["render", "scope_suffix"]


def scope_suffix(group: Group | None) -> str:
    return f"_{group.suffix}" if group is not None else ""


def _render_resolver(
    d: Dialect, enum_type: str, suffix: str, cases: Sequence[tuple[str, str]]
) -> List[str]:
    out = [d.resolver_head.format(enum_type=enum_type, suffix=suffix)]
    for identifier, resource_name in cases:
        out.append(
            d.resolver_case.format(
                enum_type=enum_type,
                identifier=identifier,
                literal=quote(resource_name),
            )
        )
    out.append(d.resolver_tail.format())
    return out


def _render_enum(
    d: Dialect, enum_type: str, scope_doc: str, members: Sequence[tuple[str, str]]
) -> List[str]:
    out = [d.enum_head.format(enum_type=enum_type, scope_doc=scope_doc)]
    for identifier, doc_name in members:
        out.append(
            d.enum_member.format(identifier=identifier, doc_name=d.doc(doc_name))
        )
    out.append(d.enum_tail.format())
    return out


def render(
    items: Sequence[ResourceItem],
    groups: Sequence[Group],
    root_namespace: str = "",
    dialect: str | Dialect = "csharp",
) -> str:
    d = get_dialect(dialect)
    parts: List[str] = [
        d.header.format(tool_ver=TOOL_VERSION, **d.namespace_fields(root_namespace))
    ]

    flat = [(d.identifier(i.identifier), i.resource_name) for i in items]
    for identifier, resource_name in flat:
        parts.append(
            d.item_accessors.format(
                identifier=identifier,
                doc_name=d.doc(resource_name),
                literal=quote(resource_name),
            )
        )

    flat_type = d.enum_type()
    parts += _render_resolver(d, flat_type, "", flat)
    parts.append(d.scope_accessors.format(enum_type=flat_type, suffix=""))

    # (group, identifiers within the group, member docs)
    scoped = [
        (
            g,
            [d.identifier(group_identifier(i, root_namespace)) for i in g.items],
            [file_segment(i.logical_path, root_namespace) for i in g.items],
        )
        for g in groups
    ]
    for g, identifiers, _ in scoped:
        suffix = scope_suffix(g)
        enum_type = d.enum_type(suffix)
        names = [i.resource_name for i in g.items]
        parts += _render_resolver(d, enum_type, suffix, list(zip(identifiers, names)))
        parts.append(d.scope_accessors.format(enum_type=enum_type, suffix=suffix))

    parts.append(d.container_tail.format())
    parts += _render_enum(d, flat_type, "", flat)

    for g, identifiers, segments in scoped:
        parts += _render_enum(
            d,
            d.enum_type(scope_suffix(g)),
            f" in '{d.doc(g.key)}'",
            list(zip(identifiers, segments)),
        )

    parts.append(d.footer.format())
    return "".join(parts)
