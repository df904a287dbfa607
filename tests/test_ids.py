import pytest

from graphtlp.errors import TlpSyntaxError
from graphtlp.model import IdList, IdRange, IdSet
from graphtlp.parser import (
    Backtrack,
    Cursor,
    Parser,
    TagNotFound,
    parse_edges_ids,
    parse_id_bloc,
    parse_id_list,
    parse_id_range,
    parse_id_set,
    parse_nodes_ids,
)


def _parser(source: str) -> Parser:
    return Parser(Cursor(source))


def test_id_range_parses_inclusive_bounds() -> None:
    parser = _parser("2002..37313")

    bloc = parse_id_range(parser)

    assert bloc == IdRange(start=2002, end=37313)
    assert len(bloc) == 35312
    assert parser.cursor.is_eof


def test_id_list_stops_before_a_range() -> None:
    parser = _parser("1 2 3..5")

    bloc = parse_id_list(parser)

    assert bloc == IdList(ids=(1, 2))
    assert parser.cursor.source[parser.position :] == " 3..5"


def test_id_bloc_prefers_range_over_list() -> None:
    assert parse_id_bloc(_parser("4..9")) == IdRange(start=4, end=9)
    assert parse_id_bloc(_parser("4 9")) == IdList(ids=(4, 9))


def test_id_set_mixes_lists_and_ranges_in_textual_order() -> None:
    parser = _parser("37830 37829..37830 37829")

    id_set = parse_id_set(parser)

    assert id_set.blocs == (
        IdList(ids=(37830,)),
        IdRange(start=37829, end=37830),
        IdList(ids=(37829,)),
    )
    assert id_set.to_list() == [37830, 37829, 37830, 37829]
    assert parser.cursor.is_eof


def test_id_set_requires_at_least_one_bloc() -> None:
    parser = _parser(")")

    with pytest.raises(Backtrack) as excinfo:
        parse_id_set(parser)

    assert excinfo.value.spec.code == "PARSER_EXPECTED_IDS"


def test_nodes_block_with_enumerated_ids() -> None:
    nodes = parse_nodes_ids(_parser("(nodes 0 1 2 3 4 5 )"))

    assert nodes == IdSet(blocs=(IdList(ids=(0, 1, 2, 3, 4, 5)),))
    assert len(nodes) == 6


def test_nodes_block_with_range() -> None:
    nodes = parse_nodes_ids(_parser("(nodes 0..5)"))

    assert nodes == IdSet(blocs=(IdRange(start=0, end=5),))
    assert nodes.to_list() == [0, 1, 2, 3, 4, 5]


def test_decreasing_range_is_kept_and_expands_to_nothing() -> None:
    nodes = parse_nodes_ids(_parser("(nodes 5..2)"))

    assert nodes.blocs == (IdRange(start=5, end=2),)
    assert len(nodes) == 0
    assert nodes.to_list() == []


def test_enumerated_ids_keep_duplicates_and_order() -> None:
    nodes = parse_nodes_ids(_parser("(nodes 3 1 3)"))

    assert nodes.to_list() == [3, 1, 3]
    assert len(nodes) == 3


def test_edges_block_spans_lines() -> None:
    edges = parse_edges_ids(_parser("(edges\n  0..3\n  7\n)"))

    assert edges.to_list() == [0, 1, 2, 3, 7]


def test_nodes_block_absent_raises_tag_not_found_without_consuming() -> None:
    parser = _parser("(edges 0)")

    with pytest.raises(TagNotFound):
        parse_nodes_ids(parser)
    assert parser.position == 0


def test_nodes_keyword_must_not_be_a_prefix() -> None:
    parser = _parser("(nodesx 1)")

    with pytest.raises(TagNotFound):
        parse_nodes_ids(parser)


def test_empty_nodes_block_is_a_syntax_error() -> None:
    with pytest.raises(TlpSyntaxError) as excinfo:
        parse_nodes_ids(_parser("(nodes )"))

    assert excinfo.value.code == "PARSER_EXPECTED_IDS"
    assert excinfo.value.label == "node set"


def test_id_set_membership() -> None:
    id_set = IdSet(blocs=(IdRange(start=10, end=20), IdList(ids=(3, 99))))

    assert 15 in id_set
    assert 99 in id_set
    assert 21 not in id_set
    assert len(id_set) == 13
