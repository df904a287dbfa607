"""Parse carrier pairing a document with its diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphtlp.diagnostics import has_errors, has_warnings
from graphtlp.model import GraphDocument
from graphtlp.parser.options import ParserOptions

if TYPE_CHECKING:
    from graphtlp.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class TlpParseResult:
    """Successful parse of one document; hard failures raise instead."""

    source_text: str
    document: GraphDocument
    diagnostics: tuple[Diagnostic, ...]
    options: ParserOptions
    source_path: str = "<memory>"

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def has_warnings(self) -> bool:
        return has_warnings(self.diagnostics)

    def diagnostics_with_code(self, code: str) -> tuple[Diagnostic, ...]:
        return tuple(diagnostic for diagnostic in self.diagnostics if diagnostic.code == code)
