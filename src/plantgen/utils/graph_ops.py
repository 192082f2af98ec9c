"""
Graph operations for the generated plant skeleton.

Turtle edges are recorded through a callback and turned into a NetworkX
directed graph whose nodes are the (rounded) points the turtle visited.
"""

# Standard library
from pathlib import Path
from typing import NamedTuple

# Third-party libraries
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

# Local libraries
from plantgen.config import DPI
from plantgen.lsystem.turtle import TurtleCallback, Vec2


class Edge(NamedTuple):
    symbol: str
    start: Vec2
    start_width: float
    end: Vec2
    end_width: float


class EdgeRecorder:
    """
    Turtle callback that stores every edge it receives.

    Register one recorder per symbol with ``recorder.for_symbol("F")``, or
    call it directly as a plain callback (edges are then tagged with
    ``default_symbol``).
    """

    def __init__(self, default_symbol: str = "F") -> None:
        self.default_symbol = default_symbol
        self.edges: list[Edge] = []

    def __call__(self, start: Vec2, start_width: float, end: Vec2, end_width: float) -> None:
        self.record(self.default_symbol, start, start_width, end, end_width)

    def record(self, symbol: str, start: Vec2, start_width: float, end: Vec2, end_width: float) -> None:
        self.edges.append(Edge(symbol, start, start_width, end, end_width))

    def for_symbol(self, symbol: str) -> TurtleCallback:
        """Return a callback recording into this recorder under ``symbol``."""

        def callback(start: Vec2, start_width: float, end: Vec2, end_width: float) -> None:
            self.record(symbol, start, start_width, end, end_width)

        return callback

    def clear(self) -> None:
        self.edges = []


def _point_key(point: Vec2, decimals: int) -> tuple[float, float]:
    x, y = np.round(np.asarray(point, dtype=np.float64)[:2], decimals)
    # -0.0 and 0.0 must map to the same node
    return (float(x) + 0.0, float(y) + 0.0)


def edges_to_digraph(edges: list[Edge], decimals: int = 6) -> nx.DiGraph:
    """
    Convert recorded edges to a NetworkX directed graph.

    :param edges: Edges in the order the turtle produced them
    :param decimals: Rounding applied to coordinates before merging points
    :returns: Graph with ``pos`` node attributes and ``symbol``,
              ``start_width``, ``end_width`` edge attributes
    """
    graph = nx.DiGraph()
    for edge in edges:
        source = _point_key(edge.start, decimals)
        target = _point_key(edge.end, decimals)
        graph.add_node(source, pos=source)
        graph.add_node(target, pos=target)
        graph.add_edge(
            source,
            target,
            symbol=edge.symbol,
            start_width=edge.start_width,
            end_width=edge.end_width,
        )
    return graph


def branch_tips(graph: nx.DiGraph) -> list[tuple[float, float]]:
    """Points where growth stopped (no outgoing edges)."""
    return [node for node, degree in graph.out_degree() if degree == 0]


def draw_skeleton(
    graph: nx.DiGraph,
    title: str = "Plant skeleton",
    save_file: Path | str | None = None,
) -> None:
    """Draw the skeleton graph at its turtle coordinates using matplotlib and networkx."""
    plt.figure()
    pos = nx.get_node_attributes(graph, "pos")
    widths = [max(float(w), 0.1) for w in nx.get_edge_attributes(graph, "start_width").values()]
    nx.draw(
        graph,
        pos,
        node_size=0,
        arrows=False,
        width=widths or 1.0,
        edge_color="#5b3a1e",
    )
    plt.gca().set_aspect("equal")
    plt.title(title)
    if save_file:
        plt.savefig(save_file, dpi=DPI)
        plt.close()
    else:
        plt.show()
