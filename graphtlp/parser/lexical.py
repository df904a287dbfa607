"""Lexical primitives: integers, whitespace, comments, strings and keywords."""

from graphtlp.diagnostics import (
    LEXER_EXPECTED_INTEGER,
    LEXER_EXPECTED_STRING,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
)
from graphtlp.parser.parser import Parser

ESCAPE_CHAR = "\\"
QUOTE_CHAR = '"'
COMMENT_CHAR = ";"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def skip_whitespace(parser: Parser) -> int:
    """Consume any run of whitespace, newlines included."""
    return parser.cursor.advance_while(str.isspace)


def expect_whitespace(parser: Parser) -> None:
    if skip_whitespace(parser) == 0:
        raise parser.fail(PARSER_EXPECTED_TOKEN, "Expected whitespace")


def skip_line_comment(parser: Parser) -> bool:
    """Consume `;` up to (not including) the end of the line."""
    cursor = parser.cursor
    if cursor.current_char() != COMMENT_CHAR:
        return False
    cursor.advance_while(lambda char: char != "\n")
    return True


def parse_uint(parser: Parser) -> int:
    cursor = parser.cursor
    start = cursor.position
    if cursor.advance_while(_is_digit) == 0:
        raise parser.fail(LEXER_EXPECTED_INTEGER)
    return int(cursor.slice_from(start))


def eat_literal(parser: Parser, text: str) -> bool:
    cursor = parser.cursor
    if cursor.at_text(text):
        cursor.advance(len(text))
        return True
    return False


def expect_literal(parser: Parser, text: str) -> None:
    if not eat_literal(parser, text):
        raise parser.fail(PARSER_EXPECTED_TOKEN, f"Expected `{text}`")


def at_keyword(parser: Parser, keyword: str) -> bool:
    """True when `keyword` starts here and is not the prefix of a longer word."""
    cursor = parser.cursor
    return cursor.at_text(keyword) and not _is_word_char(cursor.peek_char(len(keyword)))


def parse_string(parser: Parser) -> str:
    """Parse a quoted literal and return the raw text between the quotes.

    `\\"` is content and does not close the literal; nothing is unescaped.
    """
    cursor = parser.cursor
    start = cursor.position
    if cursor.current_char() != QUOTE_CHAR:
        raise parser.fail(LEXER_EXPECTED_STRING)
    cursor.advance(1)
    content_start = cursor.position

    while not cursor.is_eof:
        char = cursor.current_char()
        if char == ESCAPE_CHAR and cursor.peek_char() == QUOTE_CHAR:
            cursor.advance(2)
            continue
        if char == QUOTE_CHAR:
            value = cursor.slice_from(content_start)
            cursor.advance(1)
            return value
        cursor.advance(1)

    raise parser.hard_error(LEXER_UNTERMINATED_STRING, start=start)
