"""
Plain-text edge list reader.

One edge per line, ``tail head`` separated by whitespace. A line holding a
single name declares a vertex without adding an edge. Text after ``#`` is a
comment and blank lines are ignored::

    # build order
    app lib
    lib core
    orphan
"""

from depthflow.graph.adjacency import DirectedAdjacencyGraph


class Label(object):
    """Named vertex. Two labels with the same name are still two vertices;
    the reader creates exactly one Label per distinct name."""

    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return "Label(%r)" % self.name

    def __str__(self):
        return self.name


class EdgeListReader(object):
    """Builds a DirectedAdjacencyGraph from edge list lines.

    Attributes:
        graph: The graph being built.
        labels: Maps each name seen so far to its Label.
    """

    def __init__(self, graph=None):
        if graph is None:
            graph = DirectedAdjacencyGraph()
        self.graph = graph
        self.labels = {}

    def label(self, name):
        label = self.labels.get(name)
        if label is None:
            label = Label(name)
            self.labels[name] = label
            self.graph.add_vertex(label)
        return label

    def feed(self, lines, source="<input>"):
        for lineno, line in enumerate(lines, 1):
            tokens = line.split("#", 1)[0].split()
            if not tokens:
                continue
            if len(tokens) > 2:
                raise ValueError(
                    "%s:%d: expected 'tail head' or a single vertex name, got %r"
                    % (source, lineno, line.strip())
                )
            tail = self.label(tokens[0])
            if len(tokens) == 2:
                self.graph.add_directed_edge(tail, self.label(tokens[1]))
        return self.graph


def read_edgelist(path):
    """Read the edge list file at path.

    Returns:
        (graph, labels) where labels maps names to their Label vertices.
    """
    reader = EdgeListReader()
    with open(path, "r", encoding="utf-8") as f:
        reader.feed(f, str(path))
    return reader.graph, reader.labels


def parse_edgelist(text):
    """Parse edge list text; see read_edgelist for the return value."""
    reader = EdgeListReader()
    reader.feed(text.splitlines())
    return reader.graph, reader.labels
