from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from graphwiz import attributes as attrs
from graphwiz.ir.entity import Attributes, Defaults, Entity, Kind
from graphwiz.ir.errors import BuilderCheckedOutError, BuilderFinalizedError
from graphwiz.ir.graph import Graph, SubgraphInfo

if TYPE_CHECKING:
    from .subgraph import SubgraphBuilder

logger = logging.getLogger(__name__)


def _merge(target: Attributes, extra: Optional[Mapping[Any, Any]]) -> None:
    if extra:
        target.update({str(key): str(value) for key, value in extra.items()})


class Builder(ABC):
    """
    Everything needed to add elements to a graph.

    Each builder creates entities within its own scope. All builders of a
    graph share one write lease: a builder may only be used while it is the
    innermost open scope, so the parent of an open SubgraphBuilder is
    unusable until that child is built.
    """

    def __init__(
        self,
        graph: Graph,
        scope: Entity,
        defaults: Defaults,
        lease: List["Builder"],
    ):
        self._graph = graph
        self._scope = scope
        self._current: SubgraphInfo = graph.subgraph(scope)
        self._defaults = defaults
        self._lease = lease
        self._finalized = False

    @abstractmethod
    def build(self):
        """Finalizes this builder."""

    # ---------- elements ----------

    def new_node(self, label: Any) -> Entity:
        """
        Creates a node in the current scope with the given label and
        returns its entity.
        """
        self._ensure_active()
        entity = self._graph.new_node(str(label), self._defaults)
        self._current.nodes.append(entity)
        return entity

    def new_edge(self, head: Entity, tail: Entity) -> Entity:
        """
        Creates an edge between two entities of any kind.

        If either end is a cluster or subgraph, the root's "compound"
        attribute is set and the edge is attached to the first node found
        inside it, with lhead/ltail pointing at the scope itself.

        If either end is an edge, the new edge continues it:

            ab = builder.new_edge(a, b)   # a -> b
            cd = builder.new_edge(c, d)   # c -> d
            bc = builder.new_edge(ab, cd) # b -> c
        """
        self._ensure_active()
        entity = self._graph.new_edge(head, tail, self._defaults)
        self._current.edges.append(entity)
        return entity

    def new_subgraph(self) -> "SubgraphBuilder":
        """
        Opens a subgraph in the current scope.

        This builder can not be used again until the returned builder is
        built. Use it as a context manager to build it on exit.
        """
        self._ensure_active()
        entity = self._graph.register(Kind.SUBGRAPH, self._defaults)
        self._current.subgraphs.append(entity)
        return self._spawn(entity)

    def new_cluster(self, label: Any) -> "SubgraphBuilder":
        """Opens a cluster with the given label; see new_subgraph."""
        self._ensure_active()
        entity = self._graph.register(Kind.CLUSTER, self._defaults)
        self._current.subgraphs.append(entity)
        self._graph.attributes_mut(entity)[attrs.LABEL] = str(label)
        return self._spawn(entity)

    # ---------- elements with extra attributes ----------

    def new_node_with(self, label: Any, attribs: Mapping[Any, Any]) -> Entity:
        entity = self.new_node(label)
        _merge(self._graph.attributes_mut(entity), attribs)
        return entity

    def new_edge_with(self, head: Entity, tail: Entity, attribs: Mapping[Any, Any]) -> Entity:
        entity = self.new_edge(head, tail)
        _merge(self._graph.attributes_mut(entity), attribs)
        return entity

    def new_subgraph_with(self, attribs: Mapping[Any, Any]) -> "SubgraphBuilder":
        child = self.new_subgraph()
        _merge(self._graph.attributes_mut(child.entity), attribs)
        return child

    def new_cluster_with(self, label: Any, attribs: Mapping[Any, Any]) -> "SubgraphBuilder":
        child = self.new_cluster(label)
        _merge(self._graph.attributes_mut(child.entity), attribs)
        return child

    # ---------- defaults (scoped) ----------

    def defaults(self, kind: Kind) -> Optional[Mapping[str, str]]:
        self._ensure_active()
        found = self._defaults.get(kind)
        return None if found is None else MappingProxyType(found)

    def defaults_mut(self, kind: Kind) -> Attributes:
        self._ensure_active()
        return self._defaults.setdefault(kind, {})

    # ---------- attributes (unscoped) ----------

    def attributes(self, entity: Entity) -> Mapping[str, str]:
        self._ensure_active()
        return self._graph.attributes(entity)

    def attributes_mut(self, entity: Entity) -> Attributes:
        self._ensure_active()
        return self._graph.attributes_mut(entity)

    # ---------- lease ----------

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _spawn(self, entity: Entity) -> "SubgraphBuilder":
        from .subgraph import SubgraphBuilder

        defaults = {kind: dict(values) for kind, values in self._defaults.items()}
        child = SubgraphBuilder(self._graph, entity, defaults, self._lease)
        self._lease.append(child)
        return child

    def _ensure_active(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError(f"{self!r} was already built")
        if self._lease[-1] is not self:
            raise BuilderCheckedOutError(
                f"{self!r} is checked out by {self._lease[-1]!r}; "
                f"build the nested builder first"
            )

    def _close_open_children(self) -> None:
        while self._lease[-1] is not self:
            child = self._lease[-1]
            logger.warning("%r was never built; finalizing it with %r", child, self)
            child.build()

    def _release(self) -> None:
        if self._lease[-1] is not self:
            raise BuilderCheckedOutError(
                f"cannot build {self!r} while {self._lease[-1]!r} is still open"
            )
        self._lease.pop()
        self._graph.seal(self._scope)
        self._finalized = True
