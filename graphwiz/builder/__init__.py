from graphwiz.builder.base import Builder
from graphwiz.builder.root import RootBuilder
from graphwiz.builder.subgraph import SubgraphBuilder

__all__ = ["Builder", "RootBuilder", "SubgraphBuilder"]
