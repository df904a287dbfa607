"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint='Close the string with a double quote; write `\\"` for a quote inside it.',
    severity="error",
    category="lexer",
)

LEXER_EXPECTED_INTEGER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_EXPECTED_INTEGER",
    message="Expected an unsigned decimal integer",
    severity="error",
    category="lexer",
)

LEXER_EXPECTED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_EXPECTED_STRING",
    message="Expected a quoted string",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TAG",
    message="Expected tagged block",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_IDS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_IDS",
    message="Expected an identifier set (`a..b` ranges or whitespace separated ids)",
    severity="error",
    category="parser",
)

PARSER_UNKNOWN_PROPERTY_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNKNOWN_PROPERTY_TYPE",
    message="Unknown property type",
    hint="Use one of bool, color, double, graph, int, layout, string, size.",
    severity="error",
    category="parser",
)

PARSER_MISSING_CLOSING_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CLOSING_PAREN",
    message="Missing closing parenthesis tolerated in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_CONTENT",
    message="Unexpected content after the end of the document",
    severity="error",
    category="parser",
)

PARSER_CLUSTER_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_CLUSTER_DEPTH_EXCEEDED",
    message="Cluster nesting exceeds the configured maximum depth",
    hint="Raise `ParserOptions.max_cluster_depth` if the document is trusted.",
    severity="error",
    category="parser",
)

PARSER_RECURSION_LIMIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_RECURSION_LIMIT",
    message="Document nesting exhausted the interpreter recursion limit",
    severity="error",
    category="parser",
)

TLP_NODE_COUNT_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TLP_NODE_COUNT_MISMATCH",
    message="Declared node count does not match the parsed node set.",
    hint="`nb_nodes` is advisory; the parsed `(nodes ...)` block is used.",
    severity="warning",
    category="tlp",
)

TLP_EDGE_COUNT_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TLP_EDGE_COUNT_MISMATCH",
    message="Declared edge count does not match the parsed edges.",
    hint="`nb_edges` is advisory; the parsed `(edge ...)` blocks are used.",
    severity="warning",
    category="tlp",
)

VALIDATION_UNKNOWN_EDGE_ENDPOINT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNKNOWN_EDGE_ENDPOINT",
    message="Edge endpoint is not a declared node id.",
    severity="error",
    category="validation",
)

VALIDATION_CLUSTER_NODE_NOT_IN_PARENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_CLUSTER_NODE_NOT_IN_PARENT",
    message="Cluster node id is not part of the enclosing scope.",
    severity="warning",
    category="validation",
)

VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT",
    message="Cluster edge id is not part of the enclosing scope.",
    severity="warning",
    category="validation",
)

VALIDATION_UNKNOWN_PROPERTY_NODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNKNOWN_PROPERTY_NODE",
    message="Property override targets an undeclared node id.",
    severity="warning",
    category="validation",
)
