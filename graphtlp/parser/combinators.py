"""Generic combinators over `Parser`: ordered choice, repetition, tagged blocks."""

from collections.abc import Callable
from typing import TypeVar

from graphtlp.diagnostics import PARSER_EXPECTED_TAG, PARSER_EXPECTED_TOKEN, PARSER_MISSING_CLOSING_PAREN
from graphtlp.parser.lexical import at_keyword, eat_literal, expect_whitespace, skip_whitespace
from graphtlp.parser.parser import Backtrack, Parser

T = TypeVar("T")

ParseFn = Callable[[Parser], T]


def attempt(parser: Parser, parse: ParseFn[T]) -> T:
    """Run `parse`; on `Backtrack` rewind exactly to the start and re-raise."""
    checkpoint = parser.checkpoint()
    try:
        return parse(parser)
    except Backtrack:
        parser.rewind(checkpoint)
        raise


def optional(parser: Parser, parse: ParseFn[T]) -> T | None:
    try:
        return attempt(parser, parse)
    except Backtrack:
        return None


def choice(parser: Parser, *alternatives: ParseFn[T]) -> T:
    """Ordered choice: first alternative that matches wins."""
    last_failure: Backtrack | None = None
    for alternative in alternatives:
        try:
            return attempt(parser, alternative)
        except Backtrack as failure:
            last_failure = failure
    if last_failure is None:
        raise parser.fail(PARSER_EXPECTED_TOKEN, "No alternative to try")
    raise last_failure


def repeat(parser: Parser, parse: ParseFn[T], *, separator: ParseFn[object] | None = None) -> list[T]:
    """Zero or more `parse`, optionally separated.

    A separator that is not followed by an element is given back.
    """
    items: list[T] = []
    while True:
        checkpoint = parser.checkpoint()
        try:
            if items and separator is not None:
                separator(parser)
            start = parser.position
            items.append(parse(parser))
        except Backtrack:
            parser.rewind(checkpoint)
            return items
        if parser.position == start:
            # An element that consumes nothing would loop forever.
            return items


def separated1(parser: Parser, parse: ParseFn[T], separator: ParseFn[object]) -> list[T]:
    first = parse(parser)
    return [first, *repeat_after(parser, parse, separator)]


def repeat_after(parser: Parser, parse: ParseFn[T], separator: ParseFn[object]) -> list[T]:
    items: list[T] = []
    while True:
        checkpoint = parser.checkpoint()
        try:
            separator(parser)
            items.append(parse(parser))
        except Backtrack:
            parser.rewind(checkpoint)
            return items


def open_tag(parser: Parser, keyword: str) -> None:
    """Match `'(' ws* keyword` or raise `TagNotFound` with the cursor untouched."""
    checkpoint = parser.checkpoint()
    start = parser.position
    if eat_literal(parser, "("):
        skip_whitespace(parser)
        if at_keyword(parser, keyword):
            eat_literal(parser, keyword)
            return
    parser.rewind(checkpoint)
    raise parser.fail(PARSER_EXPECTED_TAG, f"Expected `({keyword}`", position=start, tag_not_found=True)


def close_tag(parser: Parser, keyword: str) -> None:
    """Match `ws* ')'`; a missing `)` is tolerated only when the options allow it."""
    skip_whitespace(parser)
    if eat_literal(parser, ")"):
        return
    if not parser.options.allow_missing_closing_paren:
        raise parser.fail(PARSER_EXPECTED_TOKEN, f"Expected `)` closing `({keyword}`")
    parser.warn(
        PARSER_MISSING_CLOSING_PAREN,
        parser.cursor.range_from(parser.position),
        message=f"{PARSER_MISSING_CLOSING_PAREN.message}: `({keyword}` is never closed",
    )


def tagged(parser: Parser, keyword: str, inner: ParseFn[T], *, label: str | None = None) -> T:
    """Parse `'(' ws* keyword ws+ <inner> ws* ')'?` and return the inner result.

    Raises `TagNotFound` when the opening does not match, so callers can treat
    the block as absent. Once the keyword matched, any failure is a hard
    `TlpSyntaxError` labelled with `label` (default: the keyword).
    """
    open_tag(parser, keyword)
    with parser.context(label or keyword):
        try:
            expect_whitespace(parser)
            value = inner(parser)
            close_tag(parser, keyword)
        except Backtrack as failure:
            raise parser.syntax_error(failure) from None
    return value
