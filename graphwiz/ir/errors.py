from .entity import Entity


class GraphwizError(Exception):
    """Base class for every error raised by graphwiz."""


class UnknownEntityError(GraphwizError, KeyError):
    def __init__(self, entity: Entity, table: str = "attributes"):
        self.entity = entity
        self.table = table
        super().__init__(f"{entity} is not registered in this graph ({table})")

    def __str__(self) -> str:
        return self.args[0]


class BuilderCheckedOutError(GraphwizError, RuntimeError):
    """A builder was used while a nested builder still holds the graph."""


class BuilderFinalizedError(GraphwizError, RuntimeError):
    """A builder was used after build() was called on it."""


class GraphFrozenError(GraphwizError, RuntimeError):
    """The graph was mutated after the root builder finalized it."""


class EmptyCompoundError(GraphwizError, ValueError):
    """
    An edge endpoint is a cluster or subgraph with no node anywhere in
    its subtree, so there is nothing to attach the edge to.
    """

    def __init__(self, entity: Entity):
        self.entity = entity
        super().__init__(
            f"cannot attach an edge to {entity.kind.value} {entity.id}: "
            f"it contains no node"
        )
