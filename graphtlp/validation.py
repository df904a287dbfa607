"""Opt-in reference checks on a parsed document. The parser never runs these."""

from dataclasses import dataclass, field

from graphtlp.diagnostics import (
    VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT,
    VALIDATION_CLUSTER_NODE_NOT_IN_PARENT,
    VALIDATION_UNKNOWN_EDGE_ENDPOINT,
    VALIDATION_UNKNOWN_PROPERTY_NODE,
    DiagnosticSpec,
    Severity,
)
from graphtlp.model import Cluster, GraphDocument


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    code: str
    message: str
    severity: Severity

    @staticmethod
    def from_spec(spec: DiagnosticSpec, detail: str) -> "ValidationIssue":
        return ValidationIssue(code=spec.code, message=f"{spec.message} {detail}", severity=spec.severity)


@dataclass(slots=True)
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, spec: DiagnosticSpec, detail: str) -> None:
        self.issues.append(ValidationIssue.from_spec(spec, detail))


def validate_document(document: GraphDocument) -> ValidationResult:
    result = ValidationResult()
    node_ids = set(document.iter_node_ids())
    edge_ids = {edge.id for edge in document.iter_edges()}

    for edge in document.iter_edges():
        if edge.src not in node_ids:
            result.add(VALIDATION_UNKNOWN_EDGE_ENDPOINT, f"edge {edge.id}: source {edge.src}")
        if edge.tgt not in node_ids:
            result.add(VALIDATION_UNKNOWN_EDGE_ENDPOINT, f"edge {edge.id}: target {edge.tgt}")

    for root in document.clusters or ():
        _validate_cluster(root, node_ids, edge_ids, result)

    for prop in document.properties or ():
        for override in prop.overrides:
            if override.node_id not in node_ids:
                result.add(VALIDATION_UNKNOWN_PROPERTY_NODE, f"property {prop.name!r}: node {override.node_id}")

    return result


def _validate_cluster(
    root: Cluster,
    root_node_ids: set[int],
    root_edge_ids: set[int],
    result: ValidationResult,
) -> None:
    # Pre-order; each entry carries the id sets of its enclosing scope.
    stack: list[tuple[Cluster, set[int], set[int]]] = [(root, root_node_ids, root_edge_ids)]
    while stack:
        cluster, parent_nodes, parent_edges = stack.pop()
        node_ids = set(cluster.nodes)
        edge_ids = set(cluster.edges)
        for node_id in sorted(node_ids - parent_nodes):
            result.add(VALIDATION_CLUSTER_NODE_NOT_IN_PARENT, f"cluster {cluster.id}: node {node_id}")
        for edge_id in sorted(edge_ids - parent_edges):
            result.add(VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT, f"cluster {cluster.id}: edge {edge_id}")
        for child in reversed(cluster.children):
            stack.append((child, node_ids, edge_ids))
