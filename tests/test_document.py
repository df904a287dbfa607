import pytest

from graphtlp import (
    Attribute,
    Edge,
    GraphDocument,
    IdList,
    IdRange,
    IdSet,
    ParseMode,
    ParserOptions,
    PropertyType,
    TlpParseError,
    TlpResourceLimitError,
    TlpSyntaxError,
    parse,
    parse_result,
)
from graphtlp.diagnostics import Diagnostic
from graphtlp.text import slice_text_range
from tests._debug import debug_dump_diagnostics, debug_dump_document
from tests._shared_cases import CLEAN_CASES, DOCUMENT_CASES, TlpCase, case_id, case_source


@pytest.mark.parametrize("case", DOCUMENT_CASES, ids=case_id)
def test_document_cases_parse_permissively(case: TlpCase) -> None:
    result = parse_result(case.source)

    debug_dump_document(f"document_case::{case.name}", result.document, source=case.source)
    debug_dump_diagnostics(f"document_case::{case.name}", result.diagnostics, source=case.source)

    assert result.document.node_count == case.node_count
    assert result.document.edge_count == case.edge_count
    assert tuple(diagnostic.code for diagnostic in result.diagnostics) == case.warning_codes
    assert result.has_errors is False


@pytest.mark.parametrize("case", DOCUMENT_CASES, ids=case_id)
def test_document_cases_in_strict_mode(case: TlpCase) -> None:
    if case.strict_should_parse:
        assert parse(case.source, mode=ParseMode.STRICT) == parse(case.source)
        return

    with pytest.raises(TlpSyntaxError):
        parse(case.source, mode=ParseMode.STRICT)


@pytest.mark.parametrize("case", CLEAN_CASES, ids=case_id)
def test_reparse_is_idempotent(case: TlpCase) -> None:
    first = parse(case.source)
    second = parse(case.source)

    assert first == second
    assert first is not second


def test_minimal_document() -> None:
    document = parse(case_source("minimal_document"))

    assert document == GraphDocument(
        version="2.0",
        nodes=IdSet(blocs=(IdList(ids=(0, 1, 2)),)),
        edges=(Edge(id=0, src=1, tgt=0), Edge(id=1, src=0, tgt=2)),
    )
    assert document.date is None
    assert document.author is None
    assert document.comments is None
    assert document.clusters is None
    assert document.properties is None
    assert document.attributes is None


def test_metadata_is_captured() -> None:
    document = parse(case_source("metadata_counts_and_comments"))

    assert document.version == "2.3"
    assert document.date == "05-02-2019"
    assert document.author == "someone"
    assert document.comments == "This file was generated by Tulip."
    assert document.nodes.blocs == (IdRange(start=0, end=5),)
    assert list(document.iter_edges())[-1] == Edge(id=2, src=4, tgt=5)


def test_full_document_sections() -> None:
    document = parse(case_source("clusters_properties_and_attributes"))

    assert document.clusters is not None
    assert [cluster.id for cluster in document.clusters] == [1, 3]
    assert [cluster.id for cluster in document.iter_clusters()] == [1, 2, 3]

    assert document.properties is not None
    color = document.property_named("viewColor")
    assert color is not None
    assert color.type is PropertyType.COLOR
    assert color.value_for_node(1) == "(0,0,255,255)"
    assert color.value_for_node(0) == "(255,95,95,255)"
    assert color.edge_default == "(180,180,180,255)"
    assert document.property_named("viewLabel").node_default == ""
    assert document.property_named("missing") is None

    assert document.attributes == (
        Attribute(type=PropertyType.STRING, name="name", value="sample"),
        Attribute(type=PropertyType.BOOL, name="directed", value="true"),
    )


def test_empty_attribute_section_is_reported_as_absent() -> None:
    document = parse('(tlp "2.0" (nodes 0) (graph_attributes 0) )')

    assert document.attributes is None


def test_count_mismatch_reaches_sink_and_result() -> None:
    sink: list[Diagnostic] = []

    result = parse_result(case_source("declared_node_count_mismatch"), on_diagnostic=sink.append)

    assert [diagnostic.code for diagnostic in sink] == ["TLP_NODE_COUNT_MISMATCH"]
    assert result.diagnostics == tuple(sink)
    assert result.has_warnings is True
    assert result.diagnostics_with_code("TLP_NODE_COUNT_MISMATCH")[0].message == "Expected 5 nodes but obtained 3"


def test_parse_reports_warnings_only_through_sink() -> None:
    sink: list[Diagnostic] = []

    document = parse(case_source("declared_edge_count_mismatch"), on_diagnostic=sink.append)

    assert document.edge_count == 1
    assert [diagnostic.code for diagnostic in sink] == ["TLP_EDGE_COUNT_MISMATCH"]


def test_sink_is_not_called_when_parse_fails() -> None:
    sink: list[Diagnostic] = []

    with pytest.raises(TlpSyntaxError):
        parse('(tlp "2.0" (nb_nodes 5) (nodes 0) (edge 0 0) )', on_diagnostic=sink.append)

    assert sink == []


def test_error_reports_position_and_label() -> None:
    source = '(tlp "2.0"\n(nodes 0 1)\n(edge 0 1 x)\n)'

    with pytest.raises(TlpSyntaxError) as excinfo:
        parse(source)

    error = excinfo.value
    assert error.code == "LEXER_EXPECTED_INTEGER"
    assert error.label == "edge"
    assert error.context == ("document", "edge section", "edge")
    assert (error.line, error.column) == (3, 11)
    assert error.offset == source.index("x")
    assert str(error).endswith("at line 3, column 11 (in edge)")
    assert isinstance(error, TlpParseError)
    assert isinstance(error, ValueError)


def test_missing_version_is_labelled() -> None:
    with pytest.raises(TlpSyntaxError) as excinfo:
        parse("(tlp (nodes 0))")

    assert excinfo.value.code == "LEXER_EXPECTED_STRING"
    assert excinfo.value.label == "version"


def test_missing_node_section_is_labelled() -> None:
    with pytest.raises(TlpSyntaxError) as excinfo:
        parse('(tlp "2.0" (edge 0 0 0))')

    assert excinfo.value.label == "node section"
    assert "(nodes" in excinfo.value.message


def test_missing_document_tag() -> None:
    with pytest.raises(TlpSyntaxError) as excinfo:
        parse('(graph "2.0" (nodes 0))')

    assert excinfo.value.code == "PARSER_EXPECTED_TAG"
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)


def test_empty_input_is_a_syntax_error() -> None:
    with pytest.raises(TlpSyntaxError):
        parse("")


def test_trailing_content_is_rejected() -> None:
    source = '(tlp "2.0" (nodes 0) )\nextra'

    with pytest.raises(TlpSyntaxError) as excinfo:
        parse(source)

    assert excinfo.value.code == "PARSER_TRAILING_CONTENT"
    assert excinfo.value.label == "document"
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)


def test_malformed_section_after_edges_is_reported_where_it_fails() -> None:
    with pytest.raises(TlpSyntaxError) as excinfo:
        parse('(tlp "2.0" (nodes 0) (cluster 1 (nodes 0) (edges x)) )')

    assert excinfo.value.code == "PARSER_EXPECTED_IDS"
    assert excinfo.value.label == "edge set"


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        parse(case_source("minimal_document"), ParserOptions(), mode=ParseMode.STRICT)


def test_parse_result_keeps_options_and_source() -> None:
    source = case_source("minimal_document")

    result = parse_result(source, mode=ParseMode.STRICT)

    assert result.source_text == source
    assert result.source_path == "<memory>"
    assert result.options.mode is ParseMode.STRICT
    assert result.options.allow_missing_closing_paren is False
    assert result.diagnostics == ()


def test_permissive_is_the_default_mode() -> None:
    result = parse_result(case_source("unclosed_document"))

    assert result.options.mode is ParseMode.PERMISSIVE
    warning = result.diagnostics[0]
    assert warning.severity == "warning"
    assert "`(tlp`" in warning.message


def test_cluster_depth_limit_applies_to_documents() -> None:
    nested = "".join(f"(cluster {depth} (nodes 0) (edges 0) " for depth in range(5)) + ")" * 5
    source = f'(tlp "2.0" (nodes 0) (edge 0 0 0) {nested} )'

    assert parse(source).clusters[0].depth == 5
    with pytest.raises(TlpResourceLimitError) as excinfo:
        parse(source, ParserOptions(max_cluster_depth=4))

    assert excinfo.value.code == "PARSER_CLUSTER_DEPTH_EXCEEDED"


def test_runaway_nesting_is_a_resource_error() -> None:
    levels = 5000
    nested = "(cluster 0 (nodes 0) (edges 0) " * levels + ")" * levels
    source = f'(tlp "2.0" (nodes 0) {nested} )'

    with pytest.raises(TlpResourceLimitError) as excinfo:
        parse(source, ParserOptions(max_cluster_depth=levels + 1))

    assert excinfo.value.code == "PARSER_RECURSION_LIMIT"


def test_diagnostic_ranges_point_into_the_source() -> None:
    source = case_source("declared_node_count_mismatch")
    result = parse_result(source)

    count_warning = result.diagnostics[0]
    assert slice_text_range(source, count_warning.range) == "(nb_nodes 5)"

    unclosed = parse_result(case_source("unclosed_node_section")).diagnostics[0]
    assert unclosed.range.is_empty()
    assert unclosed.range.start.value == case_source("unclosed_node_section").index("(edge")
