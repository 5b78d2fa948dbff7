"""
graphwiz - builders that assemble nested graphs and render them as
Graphviz DOT.

    root = Graph.new_builder()
    a = root.new_node("a")
    with root.new_cluster("box") as box:
        c = box.new_node("c")
    root.new_edge(c, a)
    print(render_digraph(root.build()))
"""

import logging

from graphwiz import attributes
from graphwiz.builder import Builder, RootBuilder, SubgraphBuilder
from graphwiz.compiler import (
    entity_name,
    render,
    render_digraph,
    render_graph,
    render_strict_digraph,
    render_strict_graph,
)
from graphwiz.config import GRAPHWIZ_LOG_LEVEL
from graphwiz.ir import (
    ROOT,
    Attributes,
    BuilderCheckedOutError,
    BuilderFinalizedError,
    Defaults,
    EdgeInfo,
    EmptyCompoundError,
    Entity,
    Graph,
    GraphFrozenError,
    GraphwizError,
    Kind,
    SubgraphInfo,
    UnknownEntityError,
)
from graphwiz.schemas import RenderOptions

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(GRAPHWIZ_LOG_LEVEL)

__all__ = [
    "attributes",
    "Builder",
    "RootBuilder",
    "SubgraphBuilder",
    "render",
    "render_graph",
    "render_digraph",
    "render_strict_graph",
    "render_strict_digraph",
    "entity_name",
    "RenderOptions",
    "ROOT",
    "Attributes",
    "Defaults",
    "Entity",
    "Kind",
    "EdgeInfo",
    "Graph",
    "SubgraphInfo",
    "GraphwizError",
    "UnknownEntityError",
    "BuilderCheckedOutError",
    "BuilderFinalizedError",
    "GraphFrozenError",
    "EmptyCompoundError",
]
