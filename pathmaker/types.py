"""Value types shared by the Path_maker lexer, parser and interpreter.

Path_maker has a single data type, the relative directory path. This
module defines the token representation produced by the lexer, the parsed
form of a path expression, the result of a filesystem existence query and
the `ErrorVal` diagnostic value carried by errors and warnings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# Token kinds. The names double as the lark terminal names.
MAKE = 'MAKE'
GO = 'GO'
IF = 'IF'
IFNOT = 'IFNOT'
LANGLE = 'LANGLE'
RANGLE = 'RANGLE'
LBRACE = 'LBRACE'
RBRACE = 'RBRACE'
SLASH = 'SLASH'
STAR = 'STAR'
SEMI = 'SEMI'
DIRNAME = 'DIRNAME'

KEYWORDS = (MAKE, GO, IF, IFNOT)

# Names used in the code.lex token listing.
LEX_NAMES = {
    MAKE: 't_make',
    GO: 't_go',
    IF: 't_if',
    IFNOT: 't_ifnot',
    LANGLE: 't_LessThanSign',
    RANGLE: 't_GreaterThanSign',
    LBRACE: 't_LeftCurlyBrace',
    RBRACE: 't_RightCurlyBrace',
    SLASH: 't_ForwardSlash',
    STAR: 't_Astrix',
    SEMI: 't_EndOfLine',
}


@dataclass
class Token:
    type: str
    value: str
    line: int
    column: int

    def __str__(self) -> str:
        if self.type == DIRNAME:
            return self.value
        return LEX_NAMES[self.type]


@dataclass(frozen=True)
class PathExpression:
    """A parsed `<...>` literal.

    `up_count` is the number of leading `*` operators (parent steps) and
    `segments` the lowercased directory names that follow them. A valid
    expression always has at least one component.
    """
    up_count: int
    segments: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.up_count < 0:
            raise ValueError('up_count must be non-negative')
        if self.up_count == 0 and not self.segments:
            raise ValueError('path expression must have at least one component')

    def __str__(self) -> str:
        parts = ['*'] * self.up_count + list(self.segments)
        return '<' + '/'.join(parts) + '>'


class PathStatus(Enum):
    """Result of a filesystem existence query."""
    ABSENT = 'absent'
    DIRECTORY = 'directory'
    NOT_A_DIRECTORY = 'not_a_directory'


@dataclass
class ErrorVal:
    """A named diagnostic.

    Fatal errors wrap one of these in an exception; warnings are recorded
    as-is by the interpreter.
    """
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"
