"""Abstract Syntax Tree (AST) definitions for the Path_maker language.

The interpreter normally executes statements as soon as they are parsed,
so these nodes are short-lived. `parse_program` builds a full tree of them
for the `--emit-ast` and `--ast` modes of the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .types import PathExpression


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node]


@dataclass
class MakeStmt(Node):
    path: PathExpression
    line: int = 0


@dataclass
class GoStmt(Node):
    path: PathExpression
    line: int = 0


@dataclass
class IfStmt(Node):
    path: PathExpression
    body: Node
    line: int = 0


@dataclass
class IfNotStmt(Node):
    path: PathExpression
    body: Node
    line: int = 0


@dataclass
class Block(Node):
    statements: List[Node]
    line: int = 0
