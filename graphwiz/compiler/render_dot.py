# graphwiz/compiler/render_dot.py
"""
DOT Renderer

Walks a finished Graph depth-first and writes one statement per line:
scope attributes, then nodes, then edges, then nested scopes, each in
creation order.

Attribute values are wrapped in double quotes as-is. A value that itself
contains a double quote yields invalid DOT; validate_graph reports it.
"""

import logging
from typing import Iterable, List, Mapping

from graphwiz import attributes as attrs
from graphwiz.ir.entity import ROOT, Entity
from graphwiz.ir.graph import Graph
from graphwiz.schemas import RenderOptions

logger = logging.getLogger(__name__)


def render(graph: Graph, options: RenderOptions) -> str:
    """
    Render a Graph to DOT.

    Args:
        graph: The finished graph
        options: keyword, arrow, strictness and indentation

    Returns:
        DOT source, without a trailing newline
    """
    width = name_width(graph)
    lines = _render_scope(graph, ROOT, options.header, options, width)
    logger.debug("rendered %d lines for %r", len(lines), graph)
    return "\n".join(lines)


def name_width(graph: Graph) -> int:
    """Number of digits of the highest id, shared by every name."""
    return len(str(graph.latest))


def entity_name(entity: Entity, width: int) -> str:
    return f"{entity.kind.value}_{entity.id:0{width}d}"


# -------------------------
# Scopes
# -------------------------

def _render_scope(
    graph: Graph,
    scope: Entity,
    header: str,
    options: RenderOptions,
    width: int,
) -> List[str]:
    info = graph.subgraph(scope)

    body: List[str] = _render_attributes(graph.attributes(scope))
    body.extend(_render_node(graph, node, width) for node in info.nodes)
    body.extend(_render_edge(graph, edge, options.arrow, width) for edge in info.edges)
    for child in info.subgraphs:
        child_header = f"subgraph {entity_name(child, width)} {{"
        body.extend(_render_scope(graph, child, child_header, options, width))

    return [header, *_indent(body, options.indent), "}"]


def _indent(lines: Iterable[str], size: int) -> List[str]:
    pad = " " * size
    return [pad + line for line in lines]


# -------------------------
# Statements
# -------------------------

def _render_node(graph: Graph, node: Entity, width: int) -> str:
    attributes = ", ".join(_render_attributes(graph.attributes(node)))
    return f"{entity_name(node, width)} [{attributes}]"


def _render_edge(graph: Graph, edge: Entity, arrow: str, width: int) -> str:
    info = graph.edge(edge)
    attributes = _render_attributes(graph.attributes(edge))

    if info.head_subgraph is not None:
        attributes.append(_render_attribute(attrs.LHEAD, entity_name(info.head_subgraph, width)))
    if info.tail_subgraph is not None:
        attributes.append(_render_attribute(attrs.LTAIL, entity_name(info.tail_subgraph, width)))

    head = entity_name(info.head_node, width)
    tail = entity_name(info.tail_node, width)
    return f"{head} {arrow} {tail} [{', '.join(attributes)}]"


def _render_attributes(attributes: Mapping[str, str]) -> List[str]:
    return [_render_attribute(key, value) for key, value in attributes.items()]


def _render_attribute(key: str, value: str) -> str:
    return f'{key}="{value}"'
