# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Directory grouping of resource items.

Two name shapes are understood:

- path-like names (``icons/app.png``, ``Assets\\logo.svg``) split at the
  last path separator;
- dotted manifest names (``MyApp.sub.data.json``) are read relative to the
  root namespace, and everything before the final ``name.ext`` pair is
  the directory.

Keys are kept in first-seen order; the empty key is the root group.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .model import ResourceItem
from .sanitizer import sanitize, strip_namespace

__all__ = [
    "Group",
    "split_logical_path",
    "directory_key",
    "file_segment",
    "group_identifier",
    "group_items",
    "build_groups",
]

_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class Group:
    key: str
    suffix: str
    items: Tuple[ResourceItem, ...]


def split_logical_path(
    logical_path: str, root_namespace: str = ""
) -> Tuple[str, str]:
    """Return ``(directory_key, file_segment)`` for a logical path."""
    cut = max(logical_path.rfind(sep) for sep in _SEPARATORS)
    if cut >= 0:
        return logical_path[:cut], logical_path[cut + 1 :]
    relative = strip_namespace(logical_path, root_namespace)
    parts = relative.split(".")
    if len(parts) > 2:
        return ".".join(parts[:-2]), ".".join(parts[-2:])
    return "", relative


def directory_key(logical_path: str, root_namespace: str = "") -> str:
    return split_logical_path(logical_path, root_namespace)[0]


def file_segment(logical_path: str, root_namespace: str = "") -> str:
    return split_logical_path(logical_path, root_namespace)[1]


def group_identifier(item: ResourceItem, root_namespace: str = "") -> str:
    """Identifier of ``item`` inside its group's own enumeration."""
    return sanitize(file_segment(item.logical_path, root_namespace), root_namespace)


def group_items(
    items: Iterable[ResourceItem], root_namespace: str = ""
) -> Dict[str, List[ResourceItem]]:
    grouped: Dict[str, List[ResourceItem]] = {}
    for item in items:
        key = directory_key(item.logical_path, root_namespace)
        grouped.setdefault(key, []).append(item)
    return grouped


def build_groups(
    items: Iterable[ResourceItem], root_namespace: str = ""
) -> List[Group]:
    """Named (non-root) groups in first-seen key order."""
    return [
        Group(key=key, suffix=sanitize(key, root_namespace), items=tuple(members))
        for key, members in group_items(items, root_namespace).items()
        if key
    ]
