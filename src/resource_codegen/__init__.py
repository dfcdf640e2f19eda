# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""ResourceCodeGen package

This package provides a small command-line tool and library used to
generate typed accessors for resources bundled into a build artifact.
Each resource name becomes a checked symbol (a property, an enumeration
member and a name lookup), rendered as C# or Python source.

The CLI entry point lives in :mod:`resource_codegen.cli` and the
programmatic generator in :mod:`resource_codegen.generator`.
"""

from ._version import __version__  # noqa: F401

__all__ = ["__version__"]
