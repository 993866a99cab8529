"""Lexer and parser for the Path_maker language.

This module implements the front half of the toolchain:

1. **Lexing**: the source is scanned by a Lark basic lexer configured
   with the terminals of the language. Keywords, the seven symbols and
   directory names become `Token` objects; whitespace is discarded.
   Directory names are folded to lowercase because the language treats
   them case-insensitively.

2. **Parsing**: a recursive-descent `Parser` walks the token list. The
   interpreter drives it one statement at a time, but `parse_program`
   can also build a complete `Program` AST for tooling.

Path expressions follow this grammar::

    path     := '<' uprefix? segments? '>'
    uprefix  := '*' ( '/' '*' )*
    segments := DIRNAME ( '/' DIRNAME )*

with `/` separating an up-prefix from the segments that follow it.
"""

from __future__ import annotations

import os
from typing import List, Optional, Tuple, Union

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .ast import Program, MakeStmt, GoStmt, IfStmt, IfNotStmt, Block, Node
from .errors import LexError, PathSyntaxError
from .types import (
    Token, PathExpression,
    MAKE, GO, IF, IFNOT, LANGLE, RANGLE, LBRACE, RBRACE, SLASH, STAR, SEMI, DIRNAME,
)

###############################################################################
# Lexer
###############################################################################

PATHMAKER_GRAMMAR = r"""
    start: _token*
    _token: MAKE | GO | IF | IFNOT
          | LANGLE | RANGLE | LBRACE | RBRACE | SLASH | STAR | SEMI
          | DIRNAME

    // Keywords are case-sensitive. Lark turns an exact DIRNAME match of
    // one of these strings into the keyword token.
    MAKE: "make"
    GO: "go"
    IF: "if"
    IFNOT: "ifnot"

    LANGLE: "<"
    RANGLE: ">"
    LBRACE: "{"
    RBRACE: "}"
    SLASH: "/"
    STAR: "*"
    SEMI: ";"

    DIRNAME: /[A-Za-z][A-Za-z0-9_]*/

    %import common.WS
    %ignore WS
"""


PATHMAKER_LEXER = Lark(
    PATHMAKER_GRAMMAR,
    parser='lalr',
    lexer='basic',
)

SYMBOL_CHARS = '<>{}/*;'

DEFAULT_PATH_MAX = 4096


def default_max_identifier_length() -> int:
    """Return the host's maximum path length, used to bound directory names."""
    try:
        return os.pathconf('/', 'PC_PATH_MAX')
    except (AttributeError, ValueError, OSError):
        return DEFAULT_PATH_MAX


def _offending_run(source: str, pos: int) -> str:
    # Widen the failure position to the surrounding run of characters that
    # are neither whitespace nor symbols.
    start = pos
    while start > 0 and not source[start - 1].isspace() and source[start - 1] not in SYMBOL_CHARS:
        start -= 1
    end = pos
    while end < len(source) and not source[end].isspace() and source[end] not in SYMBOL_CHARS:
        end += 1
    if end == start:
        end = start + 1
    return source[start:end]


def tokenize(source: str, max_identifier_length: Optional[int] = None) -> List[Token]:
    """Convert Path_maker source into a list of tokens.

    Raises `LexError` for characters that cannot start any token and for
    directory names longer than `max_identifier_length` (by default the
    platform's PATH_MAX).
    """
    if max_identifier_length is None:
        max_identifier_length = default_max_identifier_length()
    tokens: List[Token] = []
    try:
        for tok in PATHMAKER_LEXER.lex(source):
            value = str(tok)
            if tok.type == DIRNAME:
                if len(value) > max_identifier_length:
                    raise LexError(
                        LexError.IDENTIFIER_TOO_LONG,
                        f"Identifier length cannot be greater than {max_identifier_length} characters long.",
                        tok.line,
                    )
                value = value.lower()
            tokens.append(Token(tok.type, value, tok.line, tok.column))
    except UnexpectedCharacters as e:
        run = _offending_run(source, e.pos_in_stream)
        raise LexError(
            LexError.UNRECOGNIZED_CHARACTER,
            f"Unrecognized character: \"{run}\" in source file (line {e.line}, column {e.column}).",
            e.line,
        ) from None
    return tokens


def format_tokens(tokens: List[Token]) -> str:
    """Render tokens one per line in the `code.lex` listing format."""
    return ''.join(str(tok) + '\n' for tok in tokens)


###############################################################################
# Parser
###############################################################################


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def last_line(self) -> Optional[int]:
        if not self.tokens:
            return None
        return self.tokens[max(min(self.pos, len(self.tokens)) - 1, 0)].line

    def match(self, expected: Union[str, Tuple[str, ...]]) -> bool:
        token = self.peek()
        if token is None:
            return False
        if isinstance(expected, tuple):
            return token.type in expected
        return token.type == expected

    def consume(self, expected: str, kind: str, message: str) -> Token:
        token = self.peek()
        if token is None or token.type != expected:
            line = token.line if token is not None else self.last_line()
            raise PathSyntaxError(kind, message, line)
        self.pos += 1
        return token

    def skip_semicolons(self) -> None:
        while self.match(SEMI):
            self.pos += 1

    # Path expressions

    def parse_path(self, keyword: str = 'path') -> PathExpression:
        """Parse a bracketed path expression starting at the current token."""
        self.consume(
            LANGLE,
            PathSyntaxError.MISSING_PATH_AFTER_KEYWORD,
            f"'{keyword}' statement should be followed by a path name: '<PATH_NAME>'.",
        )
        up_count = 0
        segments: List[str] = []
        expect_component = True
        while True:
            token = self.peek()
            if token is None:
                raise PathSyntaxError(
                    PathSyntaxError.MISSING_CLOSING_ANGLE,
                    "Missing greater than sign after path name.",
                    self.last_line(),
                )
            if token.type == RANGLE:
                if expect_component:
                    if up_count == 0 and not segments:
                        raise PathSyntaxError(PathSyntaxError.INVALID_PATH, "Empty path expression '<>'.", token.line)
                    raise PathSyntaxError(
                        PathSyntaxError.INVALID_PATH,
                        "Operator '/' cannot be used at the end of a path.",
                        token.line,
                    )
                self.pos += 1
                return PathExpression(up_count, tuple(segments))
            if expect_component:
                if token.type == STAR:
                    if segments:
                        raise PathSyntaxError(
                            PathSyntaxError.INVALID_PATH,
                            "Operator '*' can only be used at the beginning of a path.",
                            token.line,
                        )
                    up_count += 1
                elif token.type == DIRNAME:
                    segments.append(token.value)
                elif token.type == SLASH:
                    if up_count == 0 and not segments:
                        message = "Operator '/' cannot be used at the beginning of a path."
                    else:
                        message = "Empty directory name between '/' operators."
                    raise PathSyntaxError(PathSyntaxError.INVALID_PATH, message, token.line)
                else:
                    raise PathSyntaxError(
                        PathSyntaxError.INVALID_PATH,
                        f"Less than sign was not followed by a valid path name, got '{token}'.",
                        token.line,
                    )
                self.pos += 1
                expect_component = False
                continue
            if token.type == SLASH:
                self.pos += 1
                expect_component = True
                continue
            if token.type in (STAR, DIRNAME):
                raise PathSyntaxError(
                    PathSyntaxError.INVALID_PATH,
                    f"Missing '/' before '{token.value}' in path.",
                    token.line,
                )
            raise PathSyntaxError(
                PathSyntaxError.MISSING_CLOSING_ANGLE,
                "Missing greater than sign after path name.",
                token.line,
            )

    # Statement heads, shared by the streaming interpreter and parse_statement

    def parse_basic_command(self) -> Node:
        """Parse `make <path>;` or `go <path>;`."""
        keyword = self.advance()
        path = self.parse_path(keyword.value)
        self.consume(
            SEMI,
            PathSyntaxError.MISSING_SEMICOLON,
            f"'{keyword.value}' statement was not followed by a semicolon.",
        )
        if keyword.type == MAKE:
            return MakeStmt(path, keyword.line)
        return GoStmt(path, keyword.line)

    def parse_condition(self) -> Tuple[Token, PathExpression]:
        """Parse the `if <path>` / `ifnot <path>` head of a conditional."""
        keyword = self.advance()
        path = self.parse_path(keyword.value)
        if self.at_end():
            raise PathSyntaxError(
                PathSyntaxError.UNEXPECTED_END_OF_INPUT,
                "End of file reached without a command completing.",
                keyword.line,
            )
        return keyword, path

    def open_block(self) -> Token:
        return self.consume(LBRACE, PathSyntaxError.UNEXPECTED_TOKEN, "Expected '{'.")

    def block_done(self, opening: Token) -> bool:
        """Consume stray semicolons and report whether the block's `}` is next.

        The closing brace itself is consumed when present.
        """
        self.skip_semicolons()
        if self.at_end():
            raise PathSyntaxError(
                PathSyntaxError.UNBALANCED_BRACES,
                "Left curly brace not closed with a right curly brace.",
                opening.line,
            )
        if self.match(RBRACE):
            self.pos += 1
            return True
        return False

    def unexpected(self, token: Token) -> PathSyntaxError:
        if token.type == RBRACE:
            return PathSyntaxError(
                PathSyntaxError.UNBALANCED_BRACES,
                "Right curly brace without a matching left curly brace.",
                token.line,
            )
        return PathSyntaxError(
            PathSyntaxError.UNEXPECTED_TOKEN,
            f"Unexpected '{token.value}'; expected make, go, if, ifnot or a block.",
            token.line,
        )

    # Full AST construction

    def parse_program(self) -> Program:
        statements: List[Node] = []
        self.skip_semicolons()
        while not self.at_end():
            statements.append(self.parse_statement())
            self.skip_semicolons()
        return Program(statements)

    def parse_statement(self) -> Node:
        token = self.peek()
        if token is None:
            raise PathSyntaxError(
                PathSyntaxError.UNEXPECTED_END_OF_INPUT,
                "End of file reached without a command completing.",
                self.last_line(),
            )
        if token.type in (MAKE, GO):
            return self.parse_basic_command()
        if token.type in (IF, IFNOT):
            keyword, path = self.parse_condition()
            body = self.parse_statement()
            if keyword.type == IF:
                return IfStmt(path, body, keyword.line)
            return IfNotStmt(path, body, keyword.line)
        if token.type == LBRACE:
            return self.parse_block()
        raise self.unexpected(token)

    def parse_block(self) -> Block:
        opening = self.open_block()
        statements: List[Node] = []
        while not self.block_done(opening):
            statements.append(self.parse_statement())
        return Block(statements, opening.line)

    def skip_statement(self) -> None:
        """Discard the next statement without executing it.

        Braces are counted so that a skipped block ends at its own closing
        brace, however deeply other blocks nest inside it. Every statement
        met on the way is still checked against the grammar.
        """
        start = self.peek()
        depth = 0
        # Set after an `if`/`ifnot` head, whose body must follow directly.
        needs_body = True
        while True:
            token = self.peek()
            if token is None:
                if depth > 0 and not needs_body:
                    raise PathSyntaxError(
                        PathSyntaxError.UNBALANCED_BRACES,
                        "Left curly brace not closed with a right curly brace.",
                        start.line,
                    )
                raise PathSyntaxError(
                    PathSyntaxError.UNEXPECTED_END_OF_INPUT,
                    "End of file reached without a command completing.",
                    self.last_line(),
                )
            if depth > 0 and not needs_body:
                if token.type == SEMI:
                    self.pos += 1
                    continue
                if token.type == RBRACE:
                    self.pos += 1
                    depth -= 1
                    if depth == 0:
                        return
                    continue
            if token.type in (MAKE, GO):
                self.parse_basic_command()
            elif token.type in (IF, IFNOT):
                self.parse_condition()
                needs_body = True
                continue
            elif token.type == LBRACE:
                self.pos += 1
                depth += 1
            else:
                raise self.unexpected(token)
            needs_body = False
            if depth == 0:
                return


def parse_program(source: str, max_identifier_length: Optional[int] = None) -> Program:
    """Parse Path_maker source code into a Program AST."""
    tokens = tokenize(source, max_identifier_length)
    parser = Parser(tokens)
    try:
        return parser.parse_program()
    except RecursionError:
        raise nesting_too_deep() from None


def nesting_too_deep() -> PathSyntaxError:
    return PathSyntaxError(PathSyntaxError.NESTING_TOO_DEEP, "Blocks are nested too deeply.")
