"""Hard parse failures."""

from __future__ import annotations

from graphtlp.diagnostics import Diagnostic, DiagnosticSpec
from graphtlp.text import TextRange


class TlpParseError(ValueError):
    """Base class for failures that abort a parse.

    Carries the furthest input position reached, its 1-based line/column and
    the stack of section labels active at that point (outermost first).
    """

    def __init__(
        self,
        spec: DiagnosticSpec,
        message: str,
        range: TextRange,
        *,
        line: int,
        column: int,
        context: tuple[str, ...] = (),
    ) -> None:
        self.spec = spec
        self.code = spec.code
        self.message = message
        self.range = range
        self.line = line
        self.column = column
        self.context = context
        super().__init__(self._render())

    @property
    def label(self) -> str | None:
        return self.context[-1] if self.context else None

    @property
    def offset(self) -> int:
        return self.range.start.value

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(self.spec, self.range, message=self.message)

    def _render(self) -> str:
        text = f"{self.message} at line {self.line}, column {self.column}"
        if self.context:
            text += f" (in {self.context[-1]})"
        return text


class TlpSyntaxError(TlpParseError):
    """Required grammar could not be matched."""


class TlpResourceLimitError(TlpParseError):
    """Nesting went past the configured or interpreter limit."""
