"""
Tests for the edge list reader and the DOT writer.
"""

import io

import pytest

from depthflow.util.io.dot import dump_graph, escapeField
from depthflow.util.io.edgelist import Label, parse_edgelist, read_edgelist


def test_parse_edges_and_isolated_vertices():
    graph, labels = parse_edgelist(
        """
        # build order
        app lib
        lib core   # trailing comment
        orphan

        app core
        """
    )
    assert list(labels) == ["app", "lib", "core", "orphan"]
    assert all(isinstance(label, Label) for label in labels.values())
    assert [str(v) for v in graph.each_vertex()] == ["app", "lib", "core", "orphan"]
    assert [(str(a), str(b)) for a, b in graph.each_edge()] == [
        ("app", "lib"),
        ("app", "core"),
        ("lib", "core"),
    ]


def test_one_label_per_name():
    graph, labels = parse_edgelist("a b\nb a\na a\n")
    assert graph.vertex_count() == 2
    assert graph.has_edge(labels["a"], labels["a"])


def test_too_many_tokens(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("a b\na b c\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"bad\.txt:2"):
        read_edgelist(path)


def test_escape_field():
    assert escapeField('say "hi"\n') == 'say \\"hi\\"\\n'


def test_dump_graph_highlights_back_edges():
    graph, labels = parse_edgelist('a b\nb a\nc\n')
    out = io.StringIO()
    dump_graph(graph, out, back_edges=[(labels["b"], labels["a"])], name="demo")
    assert out.getvalue() == (
        'digraph "demo" {\n'
        '\tv0 [label="a"];\n'
        '\tv1 [label="b"];\n'
        '\tv2 [label="c"];\n'
        "\tv0 -> v1;\n"
        '\tv1 -> v0 [color="red", style="dashed"];\n'
        "}\n"
    )
