"""Diagnostics core types."""

from collections.abc import Callable
from dataclasses import dataclass

from graphtlp.diagnostics.codes import DiagnosticSpec, Severity
from graphtlp.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser or the validation pass."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )


DiagnosticSink = Callable[[Diagnostic], None]
"""Callback receiving each diagnostic as soon as it is final."""
