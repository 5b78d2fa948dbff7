import logging

from graphwiz.ir.entity import ROOT
from graphwiz.ir.graph import Graph
from .base import Builder

logger = logging.getLogger(__name__)


class RootBuilder(Builder):
    """Builder for the root graph. Owns the Graph until build() is called."""

    def __init__(self):
        lease = []
        super().__init__(Graph(), ROOT, {}, lease)
        lease.append(self)

    def build(self) -> Graph:
        """
        Finalizes the build and returns the frozen graph.

        Nested builders that were left open are built first, innermost
        first, so no scope ends up unsealed.
        """
        if self._finalized:
            return self._graph
        self._close_open_children()
        self._release()
        self._graph.freeze()
        logger.debug("graph built: %r", self._graph)
        return self._graph

    def __repr__(self) -> str:
        return "RootBuilder()"
