"""
DOT output for directed graphs.

Writes a DirectedGraph in Graphviz DOT syntax. Vertices are numbered in
vertex order so that arbitrary objects can be drawn; their labels come from
a caller-supplied function. Edges may be highlighted, which is used to show
the back edges found by a traversal.
"""
import re

__all__ = "escapeField", "dumpAttr", "dump_graph"

# Regular expression for escaping special characters in DOT field values
makeescape = re.compile(r"[\n\t\"\\]")

lut = {"\n": r"\n", "\t": r"\t", '"': r"\"", "\\": r"\\"}

BACK_EDGE_STYLE = {"color": "red", "style": "dashed"}


def escapeField(s):
    """
    Escape a value for use inside a double-quoted DOT string.

    Args:
        s: Value to escape (converted with str() first)

    Returns:
        Escaped string
    """
    return makeescape.sub(lambda c: lut[c.group()], str(s))


def dumpAttr(attr, out):
    """
    Write attributes as [key1="value1", key2="value2"].

    Attributes are written in sorted key order so output is reproducible.
    """
    out.write(" [")
    out.write(
        ", ".join('%s="%s"' % (k, escapeField(v)) for k, v in sorted(attr.items()))
    )
    out.write("]")


def dump_graph(graph, out, label=str, back_edges=(), name="G"):
    """
    Write graph to out as a DOT digraph.

    Args:
        graph: DirectedGraph to draw.
        out: Text file object to write to.
        label: Function mapping a vertex to its label text.
        back_edges: Iterable of (tail, head) pairs to draw highlighted.
        name: Name of the digraph.
    """
    highlighted = set((id(tail), id(head)) for tail, head in back_edges)

    numbering = {}
    out.write('digraph "%s" {\n' % escapeField(name))
    for vertex in graph.each_vertex():
        numbering[id(vertex)] = "v%d" % len(numbering)
        out.write("\t%s" % numbering[id(vertex)])
        dumpAttr({"label": label(vertex)}, out)
        out.write(";\n")

    for tail, head in graph.each_edge():
        out.write("\t%s -> %s" % (numbering[id(tail)], numbering[id(head)]))
        if (id(tail), id(head)) in highlighted:
            dumpAttr(BACK_EDGE_STYLE, out)
        out.write(";\n")
    out.write("}\n")
