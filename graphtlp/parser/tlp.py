"""High-level parse entrypoints for TLP documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphtlp.diagnostics import PARSER_RECURSION_LIMIT, Diagnostic, DiagnosticSink
from graphtlp.errors import TlpResourceLimitError
from graphtlp.model import GraphDocument
from graphtlp.parser.cursor import Cursor
from graphtlp.parser.document import parse_document
from graphtlp.parser.options import ParseMode, ParserOptions
from graphtlp.parser.parser import Parser
from graphtlp.text import TextRange, TextSize

if TYPE_CHECKING:
    from graphtlp.result import TlpParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def _run(text: str, options: ParserOptions, on_diagnostic: DiagnosticSink | None) -> tuple[GraphDocument, list[Diagnostic]]:
    cursor = Cursor(text)
    parser = Parser(cursor, options=options, on_diagnostic=on_diagnostic)
    logger.debug("parsing TLP document (%d chars, mode=%s)", len(text), options.mode)
    try:
        document = parse_document(parser)
    except RecursionError:
        line, column = cursor.line_col(cursor.position)
        raise TlpResourceLimitError(
            PARSER_RECURSION_LIMIT,
            PARSER_RECURSION_LIMIT.message,
            TextRange.empty(TextSize.from_int(cursor.position)),
            line=line,
            column=column,
        ) from None
    diagnostics = parser.finish()
    logger.debug(
        "parsed TLP document: %d nodes, %d edges, %d diagnostics",
        document.node_count,
        document.edge_count,
        len(diagnostics),
    )
    return document, diagnostics


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> GraphDocument:
    """Parse `text` into a `GraphDocument`.

    Warnings (count mismatches, tolerated missing parentheses) are passed to
    `on_diagnostic`; use `parse_result` to get them back as values instead.
    Raises `TlpSyntaxError` or `TlpResourceLimitError` on hard failures.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    document, _ = _run(text, resolved_options, on_diagnostic)
    return document


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    on_diagnostic: DiagnosticSink | None = None,
    source_path: str = "<memory>",
) -> TlpParseResult:
    from graphtlp.result import TlpParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    document, diagnostics = _run(text, resolved_options, on_diagnostic)
    return TlpParseResult(
        source_text=text,
        document=document,
        diagnostics=tuple(diagnostics),
        options=resolved_options,
        source_path=source_path,
    )
