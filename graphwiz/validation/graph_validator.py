"""
Graph Validator - Structural checks on a finished graph before rendering.

Catches issues like:
- Attribute values the renderer cannot quote
- Scopes whose builder was never finalized
- Clusters with no node to draw
- Edges looping on a single node

Whether a key or value means anything to Graphviz is not checked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from graphwiz.compiler.render_dot import entity_name, name_width
from graphwiz.ir.entity import Entity, Kind
from graphwiz.ir.graph import Graph


class ValidationSeverity(Enum):
    ERROR = "error"      # Output will not parse as DOT
    WARNING = "warning"  # Output parses but likely not as intended
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue found in the graph"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    entity: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "entity": self.entity,
            "suggestion": self.suggestion,
        }


@dataclass
class GraphValidationResult:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.INFO)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}, Info: {self.info_count}"
        )


class GraphValidator:
    """
    Validates a built Graph.

    Usage:
        result = GraphValidator().validate(graph)
        for issue in result.issues:
            print(f"[{issue.severity.value}] {issue.message}")
    """

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def validate(self, graph: Graph) -> GraphValidationResult:
        width = name_width(graph)
        entities = graph.entities()

        issues: List[ValidationIssue] = []
        issues.extend(self._check_unquotable_values(graph, entities, width))
        issues.extend(self._check_unsealed_scopes(graph, entities, width))
        issues.extend(self._check_empty_clusters(graph, entities, width))
        issues.extend(self._check_self_loops(graph, entities, width))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)

        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        return GraphValidationResult(
            is_valid=is_valid,
            issues=issues,
            stats=self._calculate_stats(graph, entities),
        )

    def _check_unquotable_values(
        self, graph: Graph, entities: List[Entity], width: int
    ) -> List[ValidationIssue]:
        issues = []
        for entity in entities:
            for key, value in graph.attributes(entity).items():
                if '"' in value:
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="UNQUOTABLE_VALUE",
                        message=f"Attribute '{key}' contains a double quote",
                        entity=entity_name(entity, width),
                        suggestion="Values are written unescaped; remove the quote",
                    ))
        return issues

    def _check_unsealed_scopes(
        self, graph: Graph, entities: List[Entity], width: int
    ) -> List[ValidationIssue]:
        """
        RootBuilder.build() seals every scope, so this only fires for a
        Graph assembled by hand through register() without a builder.
        """
        issues = []
        for entity in entities:
            if entity.is_scope and not graph.subgraph(entity).sealed:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="UNSEALED_SCOPE",
                    message=f"{entity.kind.value.title()} was never finalized",
                    entity=entity_name(entity, width),
                    suggestion="Call build() on the builder or use it in a with block",
                ))
        return issues

    def _check_empty_clusters(
        self, graph: Graph, entities: List[Entity], width: int
    ) -> List[ValidationIssue]:
        issues = []
        for entity in entities:
            if entity.kind is Kind.CLUSTER and graph.locate(entity) is None:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="EMPTY_CLUSTER",
                    message="Cluster contains no node and will not be drawn",
                    entity=entity_name(entity, width),
                ))
        return issues

    def _check_self_loops(
        self, graph: Graph, entities: List[Entity], width: int
    ) -> List[ValidationIssue]:
        issues = []
        for entity in entities:
            if entity.kind is not Kind.EDGE:
                continue
            info = graph.edge(entity)
            if info.head_node == info.tail_node:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.INFO,
                    code="SELF_LOOP",
                    message=f"Edge starts and ends on {entity_name(info.head_node, width)}",
                    entity=entity_name(entity, width),
                ))
        return issues

    def _calculate_stats(self, graph: Graph, entities: List[Entity]) -> Dict[str, int]:
        counts = {kind: 0 for kind in Kind}
        compound = 0
        for entity in entities:
            counts[entity.kind] += 1
            if entity.kind is Kind.EDGE:
                info = graph.edge(entity)
                if info.head_subgraph is not None or info.tail_subgraph is not None:
                    compound += 1
        # the root is a subgraph too, but never rendered as one
        counts[Kind.SUBGRAPH] -= 1
        return {
            "nodes": counts[Kind.NODE],
            "edges": counts[Kind.EDGE],
            "clusters": counts[Kind.CLUSTER],
            "subgraphs": counts[Kind.SUBGRAPH],
            "compound_edges": compound,
        }


def validate_graph(graph: Graph, strict: bool = False) -> GraphValidationResult:
    """Convenience function to validate a graph."""
    validator = GraphValidator(strict_mode=strict)
    return validator.validate(graph)


def get_validation_summary(graph: Graph) -> str:
    return validate_graph(graph).get_summary()


def raise_on_errors(graph: Graph) -> None:
    """Validate graph and raise exception if errors found."""
    result = validate_graph(graph)
    if not result.is_valid:
        error_messages = [
            f"[{i.code}] {i.message} ({i.entity})"
            for i in result.issues
            if i.severity == ValidationSeverity.ERROR
        ]
        raise ValueError(
            f"Graph validation failed with {result.error_count} errors:\n" +
            "\n".join(error_messages)
        )
