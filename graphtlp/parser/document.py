"""Document assembler: the `(tlp ...)` block and its fixed section order."""

from collections.abc import Callable
from typing import TypeVar

from graphtlp.diagnostics import PARSER_TRAILING_CONTENT
from graphtlp.model import GraphDocument
from graphtlp.parser.clusters import parse_clusters
from graphtlp.parser.combinators import optional, tagged
from graphtlp.parser.entities import (
    parse_attributes,
    parse_author,
    parse_comments,
    parse_date,
    parse_edges_with_count,
    parse_nodes_with_count,
    parse_properties,
)
from graphtlp.parser.lexical import parse_string, skip_whitespace
from graphtlp.parser.parser import Backtrack, Parser

T = TypeVar("T")


def _required(parser: Parser, label: str, parse: Callable[[Parser], T]) -> T:
    with parser.context(label):
        try:
            value = parse(parser)
        except Backtrack as failure:
            raise parser.syntax_error(failure) from None
    skip_whitespace(parser)
    return value


def _optional(parser: Parser, label: str, parse: Callable[[Parser], T]) -> T | None:
    with parser.context(label):
        value = optional(parser, parse)
    skip_whitespace(parser)
    return value


def _non_empty(items: tuple[T, ...]) -> tuple[T, ...] | None:
    return items or None


def parse_document_inner(parser: Parser) -> GraphDocument:
    version = _required(parser, "version", parse_string)
    date = _optional(parser, "date", parse_date)
    author = _optional(parser, "author", parse_author)
    comments = _optional(parser, "comments", parse_comments)

    nodes = _required(parser, "node section", parse_nodes_with_count)
    edges = _required(parser, "edge section", parse_edges_with_count)

    with parser.context("cluster section"):
        clusters = _non_empty(parse_clusters(parser))
    skip_whitespace(parser)
    with parser.context("property section"):
        properties = _non_empty(parse_properties(parser))
    skip_whitespace(parser)
    attributes = _optional(parser, "attribute section", parse_attributes)

    return GraphDocument(
        version=version,
        nodes=nodes,
        edges=edges,
        author=author,
        comments=comments,
        date=date,
        clusters=clusters,
        properties=properties,
        attributes=_non_empty(attributes) if attributes is not None else None,
    )


def parse_document(parser: Parser) -> GraphDocument:
    """Terminal acceptor: `(tlp ...)`, trailing whitespace, then end of input."""
    skip_whitespace(parser)
    try:
        document = tagged(parser, "tlp", parse_document_inner, label="document")
    except Backtrack as failure:
        raise parser.syntax_error(failure) from None
    skip_whitespace(parser)
    with parser.context("document"):
        if not parser.cursor.is_eof:
            if parser.has_content_failure_at_or_after(parser.position):
                raise parser.syntax_error()
            raise parser.hard_error(PARSER_TRAILING_CONTENT)
    return document
