from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Kind(Enum):
    """
    The four kinds of graph entities.

    Clusters and subgraphs are kept apart so each can carry its own
    default attributes (see Builder.defaults_mut).
    """
    NODE = "node"
    EDGE = "edge"
    CLUSTER = "cluster"
    SUBGRAPH = "subgraph"


@dataclass(frozen=True)
class Entity:
    """
    Opaque identifier of a graph entity.

    Cheap to copy and hash; holds no reference to the graph it came from.
    """
    kind: Kind
    id: int

    @property
    def is_scope(self) -> bool:
        return self.kind in (Kind.CLUSTER, Kind.SUBGRAPH)


# attribute key -> value
Attributes = Dict[str, str]

# kind -> default attributes for new entities of that kind
Defaults = Dict[Kind, Attributes]


ROOT = Entity(kind=Kind.SUBGRAPH, id=0)
