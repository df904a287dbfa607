"""Parser for the TLP graph exchange format."""

from graphtlp.diagnostics import Diagnostic, DiagnosticSink
from graphtlp.errors import TlpParseError, TlpResourceLimitError, TlpSyntaxError
from graphtlp.load import load_document
from graphtlp.model import (
    Attribute,
    Cluster,
    Edge,
    GraphDocument,
    IdBloc,
    IdList,
    IdRange,
    IdSet,
    NodePropertyValue,
    Property,
    PropertyType,
)
from graphtlp.parser import ParseMode, ParserOptions, parse, parse_result
from graphtlp.result import TlpParseResult
from graphtlp.validation import ValidationIssue, ValidationResult, validate_document

__all__ = [
    "Attribute",
    "Cluster",
    "Diagnostic",
    "DiagnosticSink",
    "Edge",
    "GraphDocument",
    "IdBloc",
    "IdList",
    "IdRange",
    "IdSet",
    "NodePropertyValue",
    "ParseMode",
    "ParserOptions",
    "Property",
    "PropertyType",
    "TlpParseError",
    "TlpParseResult",
    "TlpResourceLimitError",
    "TlpSyntaxError",
    "ValidationIssue",
    "ValidationResult",
    "load_document",
    "parse",
    "parse_result",
    "validate_document",
]
