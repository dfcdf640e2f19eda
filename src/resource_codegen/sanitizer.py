# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Resource name to identifier sanitization.

Identifiers are derived character by character from the Unicode general
category of each code point:

  LETTER        Lu Ll Lt Lm Lo       kept everywhere
  CONTINUATION  Pc Nd Cf Nl Mn Mc    kept, except as the first character
  OTHER         everything else      replaced with '_'

The mapping is deterministic but lossy: distinct names may produce the
same identifier. Keywords of the target language are not checked.
"""

from __future__ import annotations

import unicodedata
from enum import Enum, auto

__all__ = [
    "CharClass",
    "classify_char",
    "strip_namespace",
    "sanitize",
]

REPLACEMENT = "_"


class CharClass(Enum):
    LETTER = auto()
    CONTINUATION = auto()
    OTHER = auto()


_CATEGORY_CLASS = {
    "Lu": CharClass.LETTER,
    "Ll": CharClass.LETTER,
    "Lt": CharClass.LETTER,
    "Lm": CharClass.LETTER,
    "Lo": CharClass.LETTER,
    "Pc": CharClass.CONTINUATION,
    "Nd": CharClass.CONTINUATION,
    "Cf": CharClass.CONTINUATION,
    "Nl": CharClass.CONTINUATION,
    "Mn": CharClass.CONTINUATION,
    "Mc": CharClass.CONTINUATION,
}

# (class, is_first) -> keep
_KEEP = {
    (CharClass.LETTER, True): True,
    (CharClass.LETTER, False): True,
    (CharClass.CONTINUATION, True): False,
    (CharClass.CONTINUATION, False): True,
    (CharClass.OTHER, True): False,
    (CharClass.OTHER, False): False,
}


def classify_char(ch: str) -> CharClass:
    """Return the identifier class of a single character."""
    return _CATEGORY_CLASS.get(unicodedata.category(ch), CharClass.OTHER)


def strip_namespace(name: str, root_namespace: str | None) -> str:
    """Drop a leading ``<root_namespace>.`` from ``name`` when present."""
    prefix = f"{root_namespace or ''}."
    if name.startswith(prefix):
        return name[len(prefix) :]
    return name


def sanitize(raw_name: str, root_namespace: str | None = "") -> str:
    """Turn ``raw_name`` into a bare identifier relative to the namespace.

    >>> sanitize("Foo.Bar.txt", "Foo")
    'Bar_txt'
    >>> sanitize("1st file.txt", "")
    '_st_file_txt'
    """
    name = strip_namespace(raw_name, root_namespace).replace(".", REPLACEMENT)
    chars = [
        ch if _KEEP[(classify_char(ch), index == 0)] else REPLACEMENT
        for index, ch in enumerate(name)
    ]
    # An empty name has no valid identifier form; use the placeholder.
    return "".join(chars) or REPLACEMENT
