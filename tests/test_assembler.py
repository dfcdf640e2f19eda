# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tests for rendering resource items into C# and Python source."""

import inspect

import pytest

from resource_codegen.assembler import render
from resource_codegen.dialects import get_dialect, quote
from resource_codegen.grouping import build_groups
from resource_codegen.model import build_items

NAMES = ["MyApp.icon.png", "MyApp.sub.data.json", "MyApp.sub.more.xml"]


def _render(names, ns="MyApp", lang="csharp"):
    items = build_items(names, ns)
    return render(items, build_groups(items, ns), ns, lang)


def _exec_python(text):
    namespace = {"__name__": "generated_resources", "__package__": "generated"}
    exec(compile(text, "embedded_resources.py", "exec"), namespace)
    return namespace


def test_csharp_flat_surface():
    cs = _render(NAMES)
    assert cs.startswith("// <auto-generated/>")
    assert "namespace MyApp;\n" in cs
    assert "public static Stream icon_png_Stream" in cs
    assert "public static StreamReader icon_png_Reader" in cs
    assert 'EmbeddedResource.icon_png => "MyApp.icon.png",' in cs
    assert 'EmbeddedResource.sub_data_json => "MyApp.sub.data.json",' in cs
    assert "public static Stream GetStream(this EmbeddedResource resource)" in cs
    assert "_ => throw new InvalidOperationException()," in cs
    assert cs.rstrip().endswith("#nullable restore")
    assert cs.count("_Stream\n") == len(NAMES)
    assert cs.count("_Reader\n") == len(NAMES)


def test_csharp_group_surface():
    cs = _render(NAMES)
    assert "public static string GetResourceName(this EmbeddedResource_sub resource)" in cs
    assert 'EmbeddedResource_sub.data_json => "MyApp.sub.data.json",' in cs
    assert 'EmbeddedResource_sub.more_xml => "MyApp.sub.more.xml",' in cs
    assert "public enum EmbeddedResource_sub\n" in cs
    assert "all embedded resources in 'sub'." in cs
    assert "Represents the embedded resource 'data.json'." in cs


def test_csharp_section_order():
    cs = _render(NAMES)
    marks = [
        "public static Stream icon_png_Stream",
        "GetResourceName(this EmbeddedResource resource)",
        "GetStream(this EmbeddedResource resource)",
        "GetResourceName(this EmbeddedResource_sub resource)",
        "GetStream(this EmbeddedResource_sub resource)",
        "public enum EmbeddedResource\n",
        "public enum EmbeddedResource_sub\n",
    ]
    positions = [cs.index(m) for m in marks]
    assert positions == sorted(positions)


def test_csharp_braces_balance():
    cs = _render(NAMES + ["a/b/c.txt", "x.y"])
    assert cs.count("{") == cs.count("}")


def test_csharp_without_namespace_omits_declaration():
    cs = _render(["icon.png"], ns="")
    assert "namespace" not in cs
    assert 'EmbeddedResource.icon_png => "icon.png",' in cs


def test_root_only_items_render_no_group_enum():
    cs = _render(["MyApp.icon.png", "MyApp.logo.svg"])
    assert "EmbeddedResource_" not in cs


def test_duplicate_names_render_independently():
    cs = _render(["MyApp.icon.png", "MyApp.icon.png"])
    assert cs.count("public static Stream icon_png_Stream") == 2
    assert cs.count('EmbeddedResource.icon_png => "MyApp.icon.png",') == 2


def test_literals_and_docs_are_escaped():
    cs = _render(['we"ird<\\>.txt'], ns="")
    assert quote('we"ird<\\>.txt') == '"we\\"ird<\\\\>.txt"'
    assert 'string resource = "we\\"ird<\\\\>.txt";' in cs
    assert "'we\"ird&lt;\\&gt;.txt'" in cs


def test_csharp_line_terminators_are_escaped():
    cs = _render(["a\x85b\u2028c.txt"], ns="")
    assert "\x85" not in cs
    assert "\u2028" not in cs
    assert 'string resource = "a\\u0085b\\u2028c.txt";' in cs
    assert "Gets the embedded resource 'a b c.txt' as a stream." in cs
    assert "public static Stream a_b_c_txt_Stream" in cs


def test_render_is_deterministic():
    assert _render(NAMES) == _render(list(NAMES))
    assert _render(NAMES, lang="python") == _render(list(NAMES), lang="python")


def test_python_output_resolves_names():
    ns = _exec_python(_render(NAMES, lang="python"))
    resources = ns["EmbeddedResources"]
    flat = ns["EmbeddedResource"]
    sub = ns["EmbeddedResource_sub"]

    assert [m.name for m in flat] == ["icon_png", "sub_data_json", "sub_more_xml"]
    assert [m.name for m in sub] == ["data_json", "more_xml"]
    assert resources.get_resource_name(flat.icon_png) == "MyApp.icon.png"
    assert resources.get_resource_name_sub(sub.data_json) == "MyApp.sub.data.json"
    assert callable(resources.stream_icon_png)
    assert callable(resources.reader_sub_data_json)
    assert callable(resources.get_stream_sub)
    assert ns["_PACKAGE"] == "MyApp"


def test_python_resolver_rejects_foreign_values():
    ns = _exec_python(_render(NAMES, lang="python"))
    with pytest.raises(RuntimeError, match="Unknown embedded resource"):
        ns["EmbeddedResources"].get_resource_name("icon_png")


def test_python_without_namespace_uses_package():
    text = _render(["icons/app.png"], ns="", lang="python")
    assert "_PACKAGE = __package__" in text
    assert "in this package" in text


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError, match="Unsupported language"):
        get_dialect("cobol")


def test_python_identifiers_stay_importable():
    names = ["get", "x.\xadb", "(copy)", "class", "__init__.py", ""]
    ns = _exec_python(_render(names, ns="", lang="python"))
    flat = ns["EmbeddedResource"]
    res = ns["EmbeddedResources"]

    assert [m.name for m in flat] == [
        "get",
        "x__b",
        "r_copy_",
        "class_",
        "r__init___py",
        "r_",
    ]
    assert res.get_resource_name(flat.x__b) == "x.\xadb"
    assert res.get_resource_name(flat.r_copy_) == "(copy)"
    assert res.get_resource_name(flat.class_) == "class"
    # The item accessor for "get" must not be shadowed by get_stream.
    assert list(inspect.signature(res.stream_get).parameters) == []
    assert list(inspect.signature(res.get_stream).parameters) == ["resource"]


def test_python_literals_survive_line_terminators():
    ns = _exec_python(_render(["a\x85b.txt"], ns="", lang="python"))
    flat = ns["EmbeddedResource"]
    assert ns["EmbeddedResources"].get_resource_name(flat.a_b_txt) == "a\x85b.txt"


def test_csharp_identifiers_keep_sanitizer_output():
    cs = _render(["(copy)"], ns="")
    assert "public static Stream _copy__Stream" in cs
