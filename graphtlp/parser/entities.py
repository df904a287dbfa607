"""Leaf entity grammar: metadata, edges, node/edge sections, properties, attributes."""

from graphtlp.diagnostics import (
    PARSER_UNKNOWN_PROPERTY_TYPE,
    TLP_EDGE_COUNT_MISMATCH,
    TLP_NODE_COUNT_MISMATCH,
)
from graphtlp.model import (
    Attribute,
    Edge,
    IdSet,
    NodePropertyValue,
    Property,
    PropertyType,
)
from graphtlp.parser.combinators import close_tag, optional, repeat, tagged
from graphtlp.parser.ids import parse_nodes_ids
from graphtlp.parser.lexical import (
    at_keyword,
    eat_literal,
    expect_whitespace,
    parse_string,
    parse_uint,
    skip_line_comment,
    skip_whitespace,
)
from graphtlp.parser.parser import Backtrack, Parser
from graphtlp.text import TextRange

PROPERTY_TYPE_KEYWORDS: tuple[PropertyType, ...] = tuple(PropertyType)


def parse_date(parser: Parser) -> str:
    return tagged(parser, "date", parse_string)


def parse_author(parser: Parser) -> str:
    return tagged(parser, "author", parse_string)


def parse_comments(parser: Parser) -> str:
    return tagged(parser, "comments", parse_string)


def _skip_count_comment(parser: Parser) -> None:
    if skip_line_comment(parser):
        skip_whitespace(parser)


def _parse_count(parser: Parser, keyword: str) -> tuple[int, TextRange] | None:
    """Optional `(keyword <uint>)` with the range it spans."""
    start = parser.position
    count = optional(parser, lambda current: tagged(current, keyword, parse_uint))
    if count is None:
        return None
    return count, parser.cursor.range_from(start)


def parse_nodes_with_count(parser: Parser) -> IdSet:
    """`(nb_nodes n)? ;comment? (nodes <idset>)`; the declared count is advisory."""
    declared = _parse_count(parser, "nb_nodes")
    skip_whitespace(parser)
    _skip_count_comment(parser)

    nodes = parse_nodes_ids(parser)

    if declared is not None:
        count, count_range = declared
        if len(nodes) != count:
            parser.warn(
                TLP_NODE_COUNT_MISMATCH,
                count_range,
                message=f"Expected {count} nodes but obtained {len(nodes)}",
            )
    return nodes


def parse_edge(parser: Parser) -> Edge:
    """`(edge id src tgt)`."""

    def edge_inner(current: Parser) -> Edge:
        edge_id = parse_uint(current)
        expect_whitespace(current)
        src = parse_uint(current)
        expect_whitespace(current)
        tgt = parse_uint(current)
        return Edge(id=edge_id, src=src, tgt=tgt)

    return tagged(parser, "edge", edge_inner)


def parse_edges_with_count(parser: Parser) -> tuple[Edge, ...]:
    """`(nb_edges n)? ;comment? (edge ...)*`; the declared count is advisory."""
    declared = _parse_count(parser, "nb_edges")
    skip_whitespace(parser)
    _skip_count_comment(parser)

    edges = tuple(repeat(parser, parse_edge, separator=skip_whitespace))

    if declared is not None:
        count, count_range = declared
        if len(edges) != count:
            parser.warn(
                TLP_EDGE_COUNT_MISMATCH,
                count_range,
                message=f"{count} edges expected, but {len(edges)} obtained",
            )
    return edges


def parse_property_type(parser: Parser) -> PropertyType:
    for property_type in PROPERTY_TYPE_KEYWORDS:
        if at_keyword(parser, property_type.value):
            eat_literal(parser, property_type.value)
            return property_type
    raise parser.fail(PARSER_UNKNOWN_PROPERTY_TYPE)


def parse_property_default(parser: Parser) -> tuple[str, str]:
    """`(default "node" "edge")`."""

    def default_inner(current: Parser) -> tuple[str, str]:
        node = parse_string(current)
        expect_whitespace(current)
        edge = parse_string(current)
        return node, edge

    return tagged(parser, "default", default_inner)


def parse_property_for_node(parser: Parser) -> NodePropertyValue:
    """`(node id "value")`."""

    def for_node_inner(current: Parser) -> NodePropertyValue:
        node_id = parse_uint(current)
        expect_whitespace(current)
        value = parse_string(current)
        return NodePropertyValue(node_id=node_id, value=value)

    return tagged(parser, "node", for_node_inner, label="node value")


def parse_property(parser: Parser) -> Property:
    def property_inner(current: Parser) -> Property:
        graph_id = parse_uint(current)
        expect_whitespace(current)
        property_type = parse_property_type(current)
        expect_whitespace(current)
        name = parse_string(current)
        skip_whitespace(current)
        node_default, edge_default = parse_property_default(current)
        skip_whitespace(current)
        overrides = repeat(current, parse_property_for_node, separator=skip_whitespace)
        return Property(
            graph_id=graph_id,
            name=name,
            type=property_type,
            node_default=node_default,
            edge_default=edge_default,
            overrides=tuple(overrides),
        )

    return tagged(parser, "property", property_inner)


def parse_properties(parser: Parser) -> tuple[Property, ...]:
    return tuple(repeat(parser, parse_property, separator=skip_whitespace))


def parse_attribute(parser: Parser) -> Attribute:
    """`(<type> "name" "value")`; an unknown type keyword means no attribute here."""
    checkpoint = parser.checkpoint()
    start = parser.position
    if not eat_literal(parser, "("):
        raise parser.fail(PARSER_UNKNOWN_PROPERTY_TYPE, "Expected `(` opening an attribute", tag_not_found=True)
    skip_whitespace(parser)
    try:
        attribute_type = parse_property_type(parser)
    except Backtrack:
        parser.rewind(checkpoint)
        raise parser.fail(PARSER_UNKNOWN_PROPERTY_TYPE, position=start, tag_not_found=True) from None

    with parser.context("attribute"):
        try:
            expect_whitespace(parser)
            name = parse_string(parser)
            expect_whitespace(parser)
            value = parse_string(parser)
            close_tag(parser, attribute_type.value)
        except Backtrack as failure:
            raise parser.syntax_error(failure) from None
    return Attribute(type=attribute_type, name=name, value=value)


def parse_attributes(parser: Parser) -> tuple[Attribute, ...]:
    """`(graph_attributes graph_id (<type> "name" "value")*)`."""

    def attributes_inner(current: Parser) -> tuple[Attribute, ...]:
        parse_uint(current)
        skip_whitespace(current)
        return tuple(repeat(current, parse_attribute, separator=skip_whitespace))

    return tagged(parser, "graph_attributes", attributes_inner, label="attribute section")
