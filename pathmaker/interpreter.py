"""Interpreter for the Path_maker language.

Statements are executed as soon as they are recognized: `run_source`
tokenizes the program and then alternates between parsing one statement
and performing its effect, so a syntax error part-way through a program
leaves the effects of the statements before it in place. `run` executes
an AST built ahead of time by `parse_program`, for the `--ast` mode of
the command line tool.

All statements resolve their path expressions against a single
`WorkingDirectory`, which only a successful `go` changes.
"""

from __future__ import annotations

import os
from typing import List, Optional

from .ast import Program, MakeStmt, GoStmt, IfStmt, IfNotStmt, Block, Node
from .environment import WorkingDirectory
from .errors import PathMakerError, PathSyntaxError
from .parser import Parser, tokenize, parse_program, nesting_too_deep
from .std.fs import BasicFS
from .types import ErrorVal, PathExpression, PathStatus, MAKE, GO, IF, IFNOT, LBRACE

PATH_ALREADY_EXISTS = 'PathAlreadyExists'
PATH_NOT_FOUND = 'PathNotFound'
BRANCH_NOT_TAKEN = 'BranchNotTaken'


class Interpreter:
    """Core interpreter that executes Path_maker programs."""
    def __init__(
        self,
        cwd: Optional[str] = None,
        fs: Optional[BasicFS] = None,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
        max_identifier_length: Optional[int] = None,
    ):
        self.cwd = WorkingDirectory(cwd if cwd is not None else os.getcwd())
        self.fs = fs if fs is not None else BasicFS()
        self.max_identifier_length = max_identifier_length
        self.warnings: List[ErrorVal] = []
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp is None:
                # Reopened for a later run on the same interpreter.
                self.debug_fp = open(self.debug_file, 'a')
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def warn(self, name: str, message: str):
        self.warnings.append(ErrorVal(name, message))
        print(message)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run_source(self, source: str) -> None:
        """Tokenize `source` and execute it statement by statement."""
        try:
            tokens = tokenize(source, self.max_identifier_length)
            if self.debug_level >= 3:
                for tok in tokens:
                    self.debug(f"token {tok.type} {tok.value!r} at {tok.line}:{tok.column}")
            parser = Parser(tokens)
            parser.skip_semicolons()
            while not parser.at_end():
                self.step(parser)
                parser.skip_semicolons()
        except RecursionError:
            raise nesting_too_deep() from None
        finally:
            self.close()

    def run(self, program: Program) -> None:
        try:
            self.execute(program)
        except RecursionError:
            raise nesting_too_deep() from None
        finally:
            self.close()

    def step(self, parser: Parser) -> None:
        """Parse the next statement from `parser` and execute it."""
        token = parser.peek()
        if token is None:
            raise PathSyntaxError(
                PathSyntaxError.UNEXPECTED_END_OF_INPUT,
                "End of file reached without a command completing.",
                parser.last_line(),
            )
        if token.type in (MAKE, GO):
            self.execute(parser.parse_basic_command())
        elif token.type in (IF, IFNOT):
            keyword, path = parser.parse_condition()
            if self.condition_holds(path, keyword.type == IFNOT, keyword.line):
                self.step(parser)
            else:
                parser.skip_statement()
        elif token.type == LBRACE:
            opening = parser.open_block()
            while not parser.block_done(opening):
                self.step(parser)
        else:
            raise parser.unexpected(token)

    def execute(self, node: Node) -> None:
        if isinstance(node, MakeStmt):
            self.make(node.path, node.line)
            return
        if isinstance(node, GoStmt):
            self.go(node.path, node.line)
            return
        if isinstance(node, (IfStmt, IfNotStmt)):
            if self.condition_holds(node.path, isinstance(node, IfNotStmt), node.line):
                self.execute(node.body)
            return
        if isinstance(node, Block):
            for stmt in node.statements:
                self.execute(stmt)
            return
        if isinstance(node, Program):
            for stmt in node.body:
                self.execute(stmt)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    # Statement handlers
    def make(self, path: PathExpression, line: int = 0) -> None:
        target = self.cwd.resolve(path)
        if self.debug_level >= 1:
            self.debug(f"line {line}: make {path} -> {target}")
        status = self.fs.stat(target)
        if self.debug_level >= 2:
            self.debug(f"stat {target}: {status.value}")
        if status is PathStatus.DIRECTORY:
            self.warn(PATH_ALREADY_EXISTS, "Path already exists. Make statement will not be executed.")
            return
        created = self.fs.create_all(target)
        print(f"Success. Path: '{created}' created with make command.")

    def go(self, path: PathExpression, line: int = 0) -> None:
        target = self.cwd.resolve(path)
        if self.debug_level >= 1:
            self.debug(f"line {line}: go {path} -> {target}")
        status = self.fs.stat(target)
        if self.debug_level >= 2:
            self.debug(f"stat {target}: {status.value}")
        if status is not PathStatus.DIRECTORY:
            self.warn(PATH_NOT_FOUND, f"Path: {target} does not exist. Go statement cannot be executed")
            return
        print("Path exists. Go statement executed.")
        self.cwd.change_to(self.fs.locate(target) or target)
        print(f"Current directory is now changed to: {self.cwd.path}")

    def condition_holds(self, path: PathExpression, negate: bool, line: int = 0) -> bool:
        """Evaluate the test of an `if` (or, with `negate`, an `ifnot`)."""
        target = self.cwd.resolve(path)
        exists = self.fs.stat(target) is PathStatus.DIRECTORY
        if self.debug_level >= 1:
            keyword = 'ifnot' if negate else 'if'
            self.debug(f"line {line}: {keyword} {path} -> {target} exists={exists}")
        if not negate:
            if exists:
                print("Path exists. If statement will be executed.")
                return True
            self.warn(
                BRANCH_NOT_TAKEN,
                f"Path: {target} does not exist. Command following if clause will not be executed.",
            )
            return False
        if exists:
            self.warn(BRANCH_NOT_TAKEN, "Path exists. Ifnot command will not be executed.")
            return False
        print(f"Path: {target} does not exist. Command following ifnot clause will execute.")
        return True


def run_program(source: str, cwd: Optional[str] = None, debug_level: int = 0) -> Interpreter:
    """Convenience function to run a Path_maker program from a source string."""
    interpreter = Interpreter(cwd=cwd, debug_level=debug_level)
    interpreter.run_source(source)
    return interpreter


def compile_module(file_path: str, max_identifier_length: Optional[int] = None) -> Program:
    """Parse a Path_maker file into a Program AST without executing it."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return parse_program(source, max_identifier_length)
