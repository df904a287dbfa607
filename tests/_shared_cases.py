"""Centralized TLP source cases used across parser/document/load tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class TlpCase:
    name: str
    source: str
    node_count: int
    edge_count: int
    warning_codes: tuple[str, ...] = ()
    strict_should_parse: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


DOCUMENT_CASES: tuple[TlpCase, ...] = (
    TlpCase(
        name="minimal_document",
        source='(tlp "2.0" (nodes 0 1 2) (edge 0 1 0) (edge 1 0 2) )',
        node_count=3,
        edge_count=2,
    ),
    TlpCase(
        name="metadata_counts_and_comments",
        source=_dedent(
            """
            (tlp "2.3"
            (date "05-02-2019")
            (author "someone")
            (comments "This file was generated by Tulip.")
            (nb_nodes 6)
            ;(nodes <node_id> <node_id> ...)
            (nodes 0..5)
            (nb_edges 3)
            ;(edge <edge_id> <source_id> <target_id>)
            (edge 0 0 1)
            (edge 1 1 2)
            (edge 2 4 5)
            )
            """
        ),
        node_count=6,
        edge_count=3,
    ),
    TlpCase(
        name="mixed_ranges_and_lists",
        source='(tlp "2.0"\n(nodes 37830 37829..37830 37829)\n)\n',
        node_count=4,
        edge_count=0,
    ),
    TlpCase(
        name="declared_node_count_mismatch",
        source='(tlp "2.0"\n(nb_nodes 5)\n(nodes 0 1 2)\n)\n',
        node_count=3,
        edge_count=0,
        warning_codes=("TLP_NODE_COUNT_MISMATCH",),
    ),
    TlpCase(
        name="declared_edge_count_mismatch",
        source='(tlp "2.0"\n(nodes 0..1)\n(nb_edges 3)\n(edge 0 0 1)\n)\n',
        node_count=2,
        edge_count=1,
        warning_codes=("TLP_EDGE_COUNT_MISMATCH",),
    ),
    TlpCase(
        name="clusters_properties_and_attributes",
        source=_dedent(
            """
            (tlp "2.3"
            (nb_nodes 4)
            (nodes 0..3)
            (nb_edges 2)
            (edge 0 0 1)
            (edge 1 2 3)
            (cluster 1
              (nodes 0 1 2)
              (edges 0)
              (cluster 2
                (nodes 0 1)
                (edges 0)
              )
            )
            (cluster 3
              (nodes 3)
              (edges 1)
            )
            (property  0 color "viewColor"
              (default "(255,95,95,255)" "(180,180,180,255)")
              (node 1 "(0,0,255,255)")
            )
            (property  0 string "viewLabel"
              (default "" "")
              (node 0 "a")
              (node 3 "d")
            )
            (graph_attributes 0
              (string "name" "sample")
              (bool "directed" "true")
            )
            )
            """
        ),
        node_count=4,
        edge_count=2,
    ),
    TlpCase(
        name="unclosed_node_section",
        source='(tlp "2.0" (nodes 0 1 2 (edge 0 0 1) )',
        node_count=3,
        edge_count=1,
        warning_codes=("PARSER_MISSING_CLOSING_PAREN",),
        strict_should_parse=False,
    ),
    TlpCase(
        name="unclosed_document",
        source='(tlp "2.0" (nodes 0)\n',
        node_count=1,
        edge_count=0,
        warning_codes=("PARSER_MISSING_CLOSING_PAREN",),
        strict_should_parse=False,
    ),
    TlpCase(
        name="leading_and_trailing_whitespace",
        source='\n\n  (tlp "2.0"\n\t(nodes 0..9)\n)\n\n',
        node_count=10,
        edge_count=0,
    ),
)

CLEAN_CASES: tuple[TlpCase, ...] = tuple(case for case in DOCUMENT_CASES if not case.warning_codes)

CaseName = Literal[
    "minimal_document",
    "metadata_counts_and_comments",
    "mixed_ranges_and_lists",
    "declared_node_count_mismatch",
    "declared_edge_count_mismatch",
    "clusters_properties_and_attributes",
    "unclosed_node_section",
    "unclosed_document",
    "leading_and_trailing_whitespace",
]

CASE_BY_NAME: dict[CaseName, TlpCase] = cast(
    dict[CaseName, TlpCase],
    {case.name: case for case in DOCUMENT_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: TlpCase) -> str:
    return case.name
