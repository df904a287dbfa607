"""Diagnostics."""

from graphtlp.diagnostics.codes import (
    LEXER_EXPECTED_INTEGER,
    LEXER_EXPECTED_STRING,
    LEXER_UNTERMINATED_STRING,
    PARSER_CLUSTER_DEPTH_EXCEEDED,
    PARSER_EXPECTED_IDS,
    PARSER_EXPECTED_TAG,
    PARSER_EXPECTED_TOKEN,
    PARSER_MISSING_CLOSING_PAREN,
    PARSER_RECURSION_LIMIT,
    PARSER_TRAILING_CONTENT,
    PARSER_UNKNOWN_PROPERTY_TYPE,
    TLP_EDGE_COUNT_MISMATCH,
    TLP_NODE_COUNT_MISMATCH,
    VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT,
    VALIDATION_CLUSTER_NODE_NOT_IN_PARENT,
    VALIDATION_UNKNOWN_EDGE_ENDPOINT,
    VALIDATION_UNKNOWN_PROPERTY_NODE,
    DiagnosticSpec,
)
from graphtlp.diagnostics.diagnostic import Diagnostic, DiagnosticSink, Severity
from graphtlp.diagnostics.report import has_errors, has_warnings

__all__ = [
    "LEXER_EXPECTED_INTEGER",
    "LEXER_EXPECTED_STRING",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_CLUSTER_DEPTH_EXCEEDED",
    "PARSER_EXPECTED_IDS",
    "PARSER_EXPECTED_TAG",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_MISSING_CLOSING_PAREN",
    "PARSER_RECURSION_LIMIT",
    "PARSER_TRAILING_CONTENT",
    "PARSER_UNKNOWN_PROPERTY_TYPE",
    "TLP_EDGE_COUNT_MISMATCH",
    "TLP_NODE_COUNT_MISMATCH",
    "VALIDATION_CLUSTER_EDGE_NOT_IN_PARENT",
    "VALIDATION_CLUSTER_NODE_NOT_IN_PARENT",
    "VALIDATION_UNKNOWN_EDGE_ENDPOINT",
    "VALIDATION_UNKNOWN_PROPERTY_NODE",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "has_warnings",
]
