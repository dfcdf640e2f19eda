# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""String templates used by the resource accessor generator.

Every template is a ``str.format`` pattern. The same accessor and resolver
templates serve the flat scope and each group scope; ``enum_type`` and
``suffix`` select the scope.
"""

# ---------------------------------------------------------------------------
# C#
# ---------------------------------------------------------------------------

CS_HEADER = """// <auto-generated/>
// Generated file - do not edit.
// Tool: ResourceCodeGen {tool_ver}
#nullable enable
{namespace_decl}using System;
using System.Collections;
using System.IO;
using System.Reflection;

/// <summary>
/// Auto-generated class to access all embedded resources in an assembly.
/// </summary>
public static partial class EmbeddedResources
{{
"""

CS_ITEM_ACCESSORS = """	/// <summary>
	/// Gets the embedded resource '{doc_name}' as a stream.
	/// </summary>
	/// <returns>The stream to access the embedded resource.</returns>
	public static Stream {identifier}_Stream
	{{
		get
		{{
			Assembly assembly = typeof(EmbeddedResources).Assembly;
			string resource = {literal};
			return assembly.GetManifestResourceStream(resource)!;
		}}
	}}

	/// <summary>
	/// Gets the embedded resource '{doc_name}' as a stream-reader.
	/// </summary>
	/// <returns>The stream-reader to access the embedded resource.</returns>
	public static StreamReader {identifier}_Reader
	{{
		get
		{{
			Assembly assembly = typeof(EmbeddedResources).Assembly;
			string resource = {literal};
			return new StreamReader(assembly.GetManifestResourceStream(resource)!);
		}}
	}}

"""

CS_RESOLVER_HEAD = """	/// <summary>
	/// Gets the embedded resource's name in the format required by <c>GetManifestResourceStream</c>.
	/// </summary>
	/// <param name="resource">The embedded resource to retrieve the name for.</param>
	/// <returns>The name to access the embedded resource.</returns>
	public static string GetResourceName(this {enum_type} resource)
	{{
		return resource switch
		{{
"""

CS_RESOLVER_CASE = """			{enum_type}.{identifier} => {literal},
"""

CS_RESOLVER_TAIL = """			_ => throw new InvalidOperationException(),
		}};
	}}

"""

CS_SCOPE_ACCESSORS = """	/// <summary>
	/// Gets the embedded resource's stream.
	/// </summary>
	/// <param name="resource">The embedded resource to retrieve the stream for.</param>
	/// <returns>The stream to access the embedded resource.</returns>
	public static Stream GetStream(this {enum_type} resource)
	{{
		Assembly assembly = typeof(EmbeddedResources).Assembly;
		return assembly.GetManifestResourceStream(GetResourceName(resource))!;
	}}

	/// <summary>
	/// Gets the embedded resource's stream-reader.
	/// </summary>
	/// <param name="resource">The embedded resource to retrieve the stream-reader for.</param>
	/// <returns>The stream-reader to access the embedded resource.</returns>
	public static StreamReader GetReader(this {enum_type} resource)
	{{
		Assembly assembly = typeof(EmbeddedResources).Assembly;
		return new StreamReader(assembly.GetManifestResourceStream(GetResourceName(resource))!);
	}}

"""

CS_CONTAINER_TAIL = """}}
"""

CS_ENUM_HEAD = """
/// <summary>
/// Auto-generated enumeration for all embedded resources{scope_doc}.
/// </summary>
public enum {enum_type}
{{
"""

CS_ENUM_MEMBER = """	/// <summary>
	/// Represents the embedded resource '{doc_name}'.
	/// </summary>
	{identifier},
"""

CS_ENUM_TAIL = """}}
"""

CS_FOOTER = """#nullable restore
"""

# ---------------------------------------------------------------------------
# Python
# ---------------------------------------------------------------------------

PY_HEADER = '''# Generated file - do not edit.
# Tool: ResourceCodeGen {tool_ver}
"""Auto-generated accessors for all embedded resources in {namespace_doc}."""

from __future__ import annotations

import enum
import io
from importlib import resources as _resources
from typing import BinaryIO, TextIO

_PACKAGE = {package_expr}


def _open_resource(resource: str) -> BinaryIO:
    return _resources.files(_PACKAGE).joinpath(resource).open("rb")


class EmbeddedResources:
    """Auto-generated class to access all embedded resources."""
'''

PY_ITEM_ACCESSORS = '''
    @staticmethod
    def stream_{identifier}() -> BinaryIO:
        """Gets the embedded resource '{doc_name}' as a stream."""
        return _open_resource({literal})

    @staticmethod
    def reader_{identifier}() -> TextIO:
        """Gets the embedded resource '{doc_name}' as a text reader."""
        return io.TextIOWrapper(_open_resource({literal}), encoding="utf-8")
'''

PY_RESOLVER_HEAD = '''
    @staticmethod
    def get_resource_name{suffix}(resource: {enum_type}) -> str:
        """Gets the embedded resource's name as passed to the loader."""
        match resource:
'''

PY_RESOLVER_CASE = """            case {enum_type}.{identifier}:
                return {literal}
"""

PY_RESOLVER_TAIL = """            case _:
                raise RuntimeError(f"Unknown embedded resource: {{resource!r}}")
"""

PY_SCOPE_ACCESSORS = '''
    @staticmethod
    def get_stream{suffix}(resource: {enum_type}) -> BinaryIO:
        """Gets the embedded resource's stream."""
        return _open_resource(EmbeddedResources.get_resource_name{suffix}(resource))

    @staticmethod
    def get_reader{suffix}(resource: {enum_type}) -> TextIO:
        """Gets the embedded resource's text reader."""
        return io.TextIOWrapper(
            EmbeddedResources.get_stream{suffix}(resource), encoding="utf-8"
        )
'''

PY_CONTAINER_TAIL = ""

PY_ENUM_HEAD = '''

class {enum_type}(enum.Enum):
    """Auto-generated enumeration for all embedded resources{scope_doc}."""

'''

PY_ENUM_MEMBER = """    {identifier} = enum.auto()  # {doc_name}
"""

PY_ENUM_TAIL = ""

PY_FOOTER = ""
