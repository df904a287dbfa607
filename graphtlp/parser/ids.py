"""Identifier-set grammar: `a..b` ranges and enumerated id lists."""

from graphtlp.diagnostics import PARSER_EXPECTED_IDS, PARSER_EXPECTED_TOKEN
from graphtlp.model import IdBloc, IdList, IdRange, IdSet
from graphtlp.parser.combinators import choice, repeat_after, separated1, tagged
from graphtlp.parser.lexical import expect_literal, expect_whitespace, parse_uint
from graphtlp.parser.parser import Backtrack, Parser

RANGE_SEPARATOR = ".."


def parse_id_range(parser: Parser) -> IdRange:
    start = parse_uint(parser)
    expect_literal(parser, RANGE_SEPARATOR)
    end = parse_uint(parser)
    return IdRange(start=start, end=end)


def _list_element(parser: Parser) -> int:
    value = parse_uint(parser)
    if parser.cursor.at_text(RANGE_SEPARATOR):
        # Belongs to a following range bloc, not to this list.
        raise parser.fail(PARSER_EXPECTED_TOKEN, "List id may not be followed by `..`")
    return value


def parse_id_list(parser: Parser) -> IdList:
    ids = separated1(parser, _list_element, expect_whitespace)
    return IdList(ids=tuple(ids))


def parse_id_bloc(parser: Parser) -> IdBloc:
    return choice(parser, parse_id_range, parse_id_list)


def parse_id_set(parser: Parser) -> IdSet:
    start = parser.position
    try:
        first = parse_id_bloc(parser)
    except Backtrack:
        raise parser.fail(PARSER_EXPECTED_IDS, position=start) from None
    blocs = [first, *repeat_after(parser, parse_id_bloc, expect_whitespace)]
    return IdSet(blocs=tuple(blocs))


def parse_nodes_ids(parser: Parser) -> IdSet:
    """`(nodes <idset>)`."""
    return tagged(parser, "nodes", parse_id_set, label="node set")


def parse_edges_ids(parser: Parser) -> IdSet:
    """`(edges <idset>)`."""
    return tagged(parser, "edges", parse_id_set, label="edge set")
