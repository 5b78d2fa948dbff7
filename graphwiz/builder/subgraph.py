import logging

from graphwiz.ir.entity import Entity
from .base import Builder

logger = logging.getLogger(__name__)


class SubgraphBuilder(Builder):
    """
    Builder for a subgraph or cluster.

    Holds the parent's graph until build() is called. Used as a context
    manager it is built on exit, whatever way the block is left:

        with root.new_cluster("front end") as front:
            front.new_node("AST")
        # front.entity is now usable from root
    """

    @property
    def entity(self) -> Entity:
        return self._scope

    def build(self) -> Entity:
        """Finalizes the scope and hands the graph back to the parent."""
        if not self._finalized:
            self._release()
            logger.debug("closed %s %d", self._scope.kind.value, self._scope.id)
        return self._scope

    def __enter__(self) -> "SubgraphBuilder":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._finalized:
            self._close_open_children()
        self.build()

    def __repr__(self) -> str:
        return f"SubgraphBuilder({self._scope.kind.value} {self._scope.id})"
