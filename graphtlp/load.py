"""Filesystem loader for TLP documents."""

from __future__ import annotations

import logging
from pathlib import Path

from graphtlp.diagnostics import DiagnosticSink
from graphtlp.parser.options import ParseMode, ParserOptions
from graphtlp.parser.tlp import parse_result
from graphtlp.result import TlpParseResult

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def load_document(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> TlpParseResult:
    """Read a UTF-8 `.tlp` file (a leading BOM is dropped) and parse it."""
    source = Path(path)
    decoded = source.read_bytes().decode("utf-8")
    text = decoded[1:] if decoded.startswith(BOM) else decoded
    logger.debug("loaded %s (%d chars)", source, len(text))
    return parse_result(
        text,
        options=options,
        mode=mode,
        on_diagnostic=on_diagnostic,
        source_path=str(source).replace("\\", "/"),
    )
