"""Parser infrastructure (cursor + backtracking parser + TLP grammar)."""

from graphtlp.parser.clusters import parse_cluster, parse_clusters
from graphtlp.parser.combinators import attempt, choice, optional, repeat, tagged
from graphtlp.parser.cursor import Cursor, CursorCheckpoint
from graphtlp.parser.document import parse_document
from graphtlp.parser.entities import (
    parse_attribute,
    parse_attributes,
    parse_edge,
    parse_edges_with_count,
    parse_nodes_with_count,
    parse_properties,
    parse_property,
    parse_property_default,
    parse_property_for_node,
    parse_property_type,
)
from graphtlp.parser.ids import (
    parse_edges_ids,
    parse_id_bloc,
    parse_id_list,
    parse_id_range,
    parse_id_set,
    parse_nodes_ids,
)
from graphtlp.parser.lexical import parse_string, parse_uint
from graphtlp.parser.options import ParseMode, ParserOptions
from graphtlp.parser.parser import Backtrack, Parser, ParserCheckpoint, TagNotFound
from graphtlp.parser.tlp import parse, parse_result

__all__ = [
    "Backtrack",
    "Cursor",
    "CursorCheckpoint",
    "ParseMode",
    "Parser",
    "ParserCheckpoint",
    "ParserOptions",
    "TagNotFound",
    "attempt",
    "choice",
    "optional",
    "parse",
    "parse_attribute",
    "parse_attributes",
    "parse_cluster",
    "parse_clusters",
    "parse_document",
    "parse_edge",
    "parse_edges_ids",
    "parse_edges_with_count",
    "parse_id_bloc",
    "parse_id_list",
    "parse_id_range",
    "parse_id_set",
    "parse_nodes_ids",
    "parse_nodes_with_count",
    "parse_properties",
    "parse_property",
    "parse_property_default",
    "parse_property_for_node",
    "parse_property_type",
    "parse_result",
    "parse_string",
    "parse_uint",
    "repeat",
    "tagged",
]
