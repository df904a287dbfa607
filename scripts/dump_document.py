#!/usr/bin/env python
import argparse
from pathlib import Path

from graphtlp import Cluster, GraphDocument, ParseMode, TlpParseError, load_document, validate_document
from graphtlp.text import LineIndex, slice_text_range


def format_cluster(cluster: Cluster, depth: int) -> list[str]:
    indent = "  " * depth
    lines = [f"{indent}cluster {cluster.id} nodes={len(cluster.nodes)} edges={len(cluster.edges)}"]
    for child in cluster.children:
        lines.extend(format_cluster(child, depth + 1))
    return lines


def format_document(document: GraphDocument) -> list[str]:
    lines = [
        f"version={document.version!r}",
        f"date={document.date!r}",
        f"author={document.author!r}",
        f"comments={document.comments!r}",
        f"nodes={document.node_count} in {len(document.nodes.blocs)} blocs",
        f"edges={document.edge_count}",
    ]
    for cluster in document.clusters or ():
        lines.extend(format_cluster(cluster, 1))
    for prop in document.properties or ():
        lines.append(
            f"property {prop.type} {prop.name!r} default=({prop.node_default!r}, {prop.edge_default!r}) "
            f"overrides={len(prop.overrides)}"
        )
    for attribute in document.attributes or ():
        lines.append(f"attribute {attribute.type} {attribute.name!r}={attribute.value!r}")
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Summarise a .tlp document")
    parser.add_argument("path", type=Path, help="TLP file to parse")
    parser.add_argument("--strict", action="store_true", help="Reject unclosed blocks")
    parser.add_argument("--validate", action="store_true", help="Also run reference checks")
    args = parser.parse_args()

    mode = ParseMode.STRICT if args.strict else ParseMode.PERMISSIVE
    try:
        result = load_document(args.path, mode=mode)
    except TlpParseError as error:
        print(f"{args.path}: {error.code}: {error}")
        return 1

    for line in format_document(result.document):
        print(line)

    line_index = LineIndex.of(result.source_text)
    for diagnostic in result.diagnostics:
        line, column = line_index.line_col(diagnostic.range.start)
        print(f"{args.path}:{line}:{column}: {diagnostic.severity}: {diagnostic.message}")
        if not diagnostic.range.is_empty():
            print(f"    {slice_text_range(result.source_text, diagnostic.range)}")

    if args.validate:
        validation = validate_document(result.document)
        for issue in validation.issues:
            print(f"{issue.severity}: {issue.code}: {issue.message}")
        if not validation.ok:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
