"""Recursive cluster grammar."""

from graphtlp.model import Cluster
from graphtlp.parser.combinators import repeat, tagged
from graphtlp.parser.ids import parse_edges_ids, parse_nodes_ids
from graphtlp.parser.lexical import expect_whitespace, parse_uint, skip_whitespace
from graphtlp.parser.parser import Parser


def parse_cluster(parser: Parser, depth: int = 1) -> Cluster:
    """`(cluster id (nodes ...) (edges ...) (cluster ...)*)`.

    Nesting past `options.max_cluster_depth` raises `TlpResourceLimitError`.
    """
    start = parser.position

    def cluster_inner(current: Parser) -> Cluster:
        if depth > current.options.max_cluster_depth:
            raise current.depth_error(depth, start)
        cluster_id = parse_uint(current)
        expect_whitespace(current)
        nodes = parse_nodes_ids(current)
        skip_whitespace(current)
        edges = parse_edges_ids(current)
        skip_whitespace(current)
        children = repeat(
            current,
            lambda nested: parse_cluster(nested, depth + 1),
            separator=skip_whitespace,
        )
        return Cluster(id=cluster_id, nodes=nodes, edges=edges, children=tuple(children))

    return tagged(parser, "cluster", cluster_inner)


def parse_clusters(parser: Parser) -> tuple[Cluster, ...]:
    """Top-level cluster forest; empty when no `(cluster` follows."""
    return tuple(repeat(parser, parse_cluster, separator=skip_whitespace))
