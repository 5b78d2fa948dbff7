from graphwiz.compiler.render_dot import entity_name, name_width, render
from graphwiz.ir.graph import Graph
from graphwiz.schemas import DIGRAPH, GRAPH, STRICT_DIGRAPH, STRICT_GRAPH


def render_graph(graph: Graph) -> str:
    return render(graph, GRAPH)


def render_digraph(graph: Graph) -> str:
    return render(graph, DIGRAPH)


def render_strict_graph(graph: Graph) -> str:
    return render(graph, STRICT_GRAPH)


def render_strict_digraph(graph: Graph) -> str:
    return render(graph, STRICT_DIGRAPH)


__all__ = [
    "render",
    "render_graph",
    "render_digraph",
    "render_strict_graph",
    "render_strict_digraph",
    "entity_name",
    "name_width",
]
