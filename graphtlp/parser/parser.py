"""Backtracking parser core."""

from contextlib import contextmanager
from dataclasses import dataclass

from graphtlp.diagnostics import (
    PARSER_CLUSTER_DEPTH_EXCEEDED,
    PARSER_EXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSink,
    DiagnosticSpec,
)
from graphtlp.errors import TlpResourceLimitError, TlpSyntaxError
from graphtlp.parser.cursor import Cursor, CursorCheckpoint
from graphtlp.parser.options import ParserOptions
from graphtlp.text import TextRange, TextSize


class Backtrack(Exception):
    """Recoverable failure: the caller may rewind and try another alternative."""

    def __init__(self, position: int, spec: DiagnosticSpec, message: str) -> None:
        self.position = position
        self.spec = spec
        self.message = message
        super().__init__(message)


class TagNotFound(Backtrack):
    """`(` + keyword did not match; the section is absent, not malformed."""


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    cursor_checkpoint: CursorCheckpoint
    diagnostics_len: int


@dataclass(frozen=True, slots=True)
class FurthestFailure:
    position: int
    spec: DiagnosticSpec
    message: str
    context: tuple[str, ...]
    tag_not_found: bool = False

    def is_superseded_by(self, position: int, tag_not_found: bool) -> bool:
        # At the same position a content failure outranks an absent tag.
        if position != self.position:
            return position > self.position
        return self.tag_not_found or not tag_not_found


class Parser:
    """Cursor plus diagnostics, section labels and options for one parse pass."""

    def __init__(
        self,
        cursor: Cursor,
        options: ParserOptions | None = None,
        *,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> None:
        self._cursor = cursor
        self._options = options or ParserOptions()
        self._on_diagnostic = on_diagnostic
        self._diagnostics: list[Diagnostic] = []
        self._context: list[str] = []
        self._furthest: FurthestFailure | None = None

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._cursor.position

    @property
    def context_labels(self) -> tuple[str, ...]:
        return tuple(self._context)

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(
            cursor_checkpoint=self._cursor.checkpoint,
            diagnostics_len=len(self._diagnostics),
        )

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._cursor.rewind(checkpoint.cursor_checkpoint)
        del self._diagnostics[checkpoint.diagnostics_len :]

    @contextmanager
    def context(self, label: str):
        self._context.append(label)
        try:
            yield
        finally:
            self._context.pop()

    def fail(
        self,
        spec: DiagnosticSpec = PARSER_EXPECTED_TOKEN,
        message: str | None = None,
        *,
        position: int | None = None,
        tag_not_found: bool = False,
    ) -> Backtrack:
        """Record a failure and build the exception for the caller to raise."""
        at = self.position if position is None else position
        text = message if message is not None else spec.message
        if self._furthest is None or self._furthest.is_superseded_by(at, tag_not_found):
            self._furthest = FurthestFailure(
                position=at,
                spec=spec,
                message=text,
                context=self.context_labels,
                tag_not_found=tag_not_found,
            )
        if tag_not_found:
            return TagNotFound(at, spec, text)
        return Backtrack(at, spec, text)

    def has_content_failure_at_or_after(self, position: int) -> bool:
        furthest = self._furthest
        return furthest is not None and not furthest.tag_not_found and furthest.position >= position

    def syntax_error(self, failure: Backtrack | None = None) -> TlpSyntaxError:
        """Turn the furthest recorded failure into a hard error."""
        furthest = self._furthest
        if failure is not None and (furthest is None or failure.position > furthest.position):
            furthest = FurthestFailure(failure.position, failure.spec, failure.message, self.context_labels)
        if furthest is None:
            furthest = FurthestFailure(
                self.position,
                PARSER_EXPECTED_TOKEN,
                PARSER_EXPECTED_TOKEN.message,
                self.context_labels,
            )
        line, column = self._cursor.line_col(furthest.position)
        return TlpSyntaxError(
            furthest.spec,
            furthest.message,
            TextRange.empty(TextSize.from_int(furthest.position)),
            line=line,
            column=column,
            context=furthest.context or self.context_labels,
        )

    def hard_error(self, spec: DiagnosticSpec, message: str | None = None, *, start: int | None = None) -> TlpSyntaxError:
        """Hard error anchored at the current position, ignoring earlier failures."""
        begin = self.position if start is None else start
        line, column = self._cursor.line_col(begin)
        return TlpSyntaxError(
            spec,
            message if message is not None else spec.message,
            self._cursor.range_from(begin) if begin <= self.position else TextRange.empty(TextSize.from_int(begin)),
            line=line,
            column=column,
            context=self.context_labels,
        )

    def depth_error(self, depth: int, start: int) -> TlpResourceLimitError:
        line, column = self._cursor.line_col(start)
        spec = PARSER_CLUSTER_DEPTH_EXCEEDED
        return TlpResourceLimitError(
            spec,
            f"{spec.message} ({depth} > {self._options.max_cluster_depth})",
            TextRange.empty(TextSize.from_int(start)),
            line=line,
            column=column,
            context=self.context_labels,
        )

    def warn(self, spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, range, message=message))

    def finish(self) -> list[Diagnostic]:
        """Hand the surviving diagnostics to the sink and return them."""
        if self._on_diagnostic is not None:
            for diagnostic in self._diagnostics:
                self._on_diagnostic(diagnostic)
        return self._diagnostics
