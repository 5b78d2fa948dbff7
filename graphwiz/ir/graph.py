"""
Graph store.

Every entity lives in flat tables keyed by Entity: one attribute dict per
entity, one SubgraphInfo per cluster/subgraph and one EdgeInfo per edge.
Membership lists hold entities, never objects, so nested scopes do not
form reference cycles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Tuple

from graphwiz import attributes as attrs
from .entity import ROOT, Attributes, Defaults, Entity, Kind
from .errors import EmptyCompoundError, GraphFrozenError, UnknownEntityError

if TYPE_CHECKING:
    from graphwiz.builder.root import RootBuilder

logger = logging.getLogger(__name__)


@dataclass
class SubgraphInfo:
    """Members of one scope, in creation order."""
    nodes: List[Entity] = field(default_factory=list)
    edges: List[Entity] = field(default_factory=list)
    subgraphs: List[Entity] = field(default_factory=list)
    sealed: bool = False


@dataclass(frozen=True)
class EdgeInfo:
    """
    Resolved endpoints of an edge.

    head_node / tail_node are always nodes. head_subgraph / tail_subgraph
    are only set when that side was given as a cluster or subgraph.
    """
    head_node: Entity
    tail_node: Entity
    head_subgraph: Optional[Entity] = None
    tail_subgraph: Optional[Entity] = None


# (node used in the output, scope the caller actually named)
Endpoint = Tuple[Entity, Optional[Entity]]


class Graph:
    """
    The finished graph, and the store builders write into.

    A Graph is not created by hand: Graph.new_builder() returns a
    RootBuilder, and RootBuilder.build() hands back the frozen Graph,
    ready for any of the render functions.
    """

    def __init__(self):
        self._attributes: Dict[Entity, Attributes] = {ROOT: {}}
        self._subgraphs: Dict[Entity, SubgraphInfo] = {ROOT: SubgraphInfo()}
        self._edges: Dict[Entity, EdgeInfo] = {}
        self._latest = ROOT.id
        self._frozen = False

    @staticmethod
    def new_builder() -> "RootBuilder":
        from graphwiz.builder.root import RootBuilder
        return RootBuilder()

    # ---------- read access ----------

    @property
    def latest(self) -> int:
        """Highest id issued so far."""
        return self._latest

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def root(self) -> SubgraphInfo:
        return self._subgraphs[ROOT]

    def entities(self) -> List[Entity]:
        """Every registered entity, root included, in id order."""
        return sorted(self._attributes, key=lambda e: e.id)

    def attributes(self, entity: Entity) -> Mapping[str, str]:
        return MappingProxyType(self._lookup_attributes(entity))

    def subgraph(self, entity: Entity) -> SubgraphInfo:
        try:
            return self._subgraphs[entity]
        except KeyError:
            raise UnknownEntityError(entity, "subgraphs") from None

    def edge(self, entity: Entity) -> EdgeInfo:
        try:
            return self._edges[entity]
        except KeyError:
            raise UnknownEntityError(entity, "edges") from None

    # ---------- mutation ----------

    def attributes_mut(self, entity: Entity) -> Attributes:
        self._ensure_mutable()
        return self._lookup_attributes(entity)

    def register(self, kind: Kind, defaults: Defaults) -> Entity:
        self._ensure_mutable()
        self._latest += 1
        entity = Entity(kind=kind, id=self._latest)
        self._attributes[entity] = dict(defaults.get(kind, {}))
        if entity.is_scope:
            self._subgraphs[entity] = SubgraphInfo()
        logger.debug("registered %s %d", kind.value, entity.id)
        return entity

    def new_node(self, label: str, defaults: Defaults) -> Entity:
        entity = self.register(Kind.NODE, defaults)
        self._attributes[entity][attrs.LABEL] = str(label)
        return entity

    def new_edge(self, head: Entity, tail: Entity, defaults: Defaults) -> Entity:
        """
        Creates an edge between any two entities.

        Both sides are resolved before anything is written, so a failed
        resolution leaves the graph untouched.
        """
        self._ensure_mutable()
        head_node, head_subgraph = self._resolve(head, forward_to_tail=True)
        tail_node, tail_subgraph = self._resolve(tail, forward_to_tail=False)

        if head_subgraph is not None or tail_subgraph is not None:
            self._attributes[ROOT][attrs.COMPOUND] = "true"

        entity = self.register(Kind.EDGE, defaults)
        self._edges[entity] = EdgeInfo(
            head_node=head_node,
            tail_node=tail_node,
            head_subgraph=head_subgraph,
            tail_subgraph=tail_subgraph,
        )
        return entity

    def seal(self, entity: Entity) -> None:
        self.subgraph(entity).sealed = True

    def freeze(self) -> None:
        self._frozen = True

    # ---------- resolution ----------

    def locate(self, entity: Entity) -> Optional[Entity]:
        """
        First node of a scope: its own first node, otherwise the first node
        found depth-first through its child scopes in creation order.
        """
        info = self.subgraph(entity)
        if info.nodes:
            return info.nodes[0]
        for child in info.subgraphs:
            found = self.locate(child)
            if found is not None:
                return found
        return None

    def _resolve(self, entity: Entity, forward_to_tail: bool) -> Endpoint:
        if entity.kind is Kind.NODE:
            self._lookup_attributes(entity)
            return entity, None

        if entity.kind is Kind.EDGE:
            # edge chaining: continue from the side of the referenced edge
            # that faces the new one
            info = self.edge(entity)
            if forward_to_tail:
                return info.tail_node, info.tail_subgraph
            return info.head_node, info.head_subgraph

        node = self.locate(entity)
        if node is None:
            raise EmptyCompoundError(entity)
        logger.debug(
            "compound endpoint %s %d resolved to node %d",
            entity.kind.value, entity.id, node.id,
        )
        return node, entity

    # ---------- helpers ----------

    def _lookup_attributes(self, entity: Entity) -> Attributes:
        try:
            return self._attributes[entity]
        except KeyError:
            raise UnknownEntityError(entity) from None

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("graph was already built; it can no longer be modified")

    def __repr__(self) -> str:
        return (
            f"Graph(entities={len(self._attributes)}, "
            f"edges={len(self._edges)}, latest={self._latest})"
        )
