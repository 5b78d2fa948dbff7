from graphwiz.ir.entity import ROOT, Attributes, Defaults, Entity, Kind
from graphwiz.ir.errors import (
    BuilderCheckedOutError,
    BuilderFinalizedError,
    EmptyCompoundError,
    GraphFrozenError,
    GraphwizError,
    UnknownEntityError,
)
from graphwiz.ir.graph import EdgeInfo, Graph, SubgraphInfo

__all__ = [
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
