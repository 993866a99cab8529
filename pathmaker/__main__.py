"""CLI entry point for the Path_maker interpreter.

Usage:
    python -m pathmaker [-v|-vv|-vvv] [--cwd DIR] <program>
    python -m pathmaker [-v...] --emit-ast <program>
    python -m pathmaker [-v...] --emit-tokens <program>
    python -m pathmaker [-v...] --ast <ast_json_file>

Options:
  -v              Increase debug verbosity (can be repeated)
  --cwd DIR       Directory that relative paths start from (default: the
                  process's current directory)
  --emit-ast      Parse the given program and emit an AST JSON file
  --emit-tokens   Tokenize the given program and write `code.lex` beside it
  --ast           Execute a previously emitted AST JSON file

The program name may be given without its `.pmk` extension. When it is
omitted altogether the interpreter asks for it. Debug information is
written to `debug.txt` in the current directory when verbosity is greater
than zero.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional

from .ast_json import ast_to_obj, ast_from_obj
from .errors import PathMakerError
from .interpreter import Interpreter
from .parser import parse_program, tokenize, format_tokens, nesting_too_deep

SOURCE_SUFFIX = '.pmk'


def find_program(name: str) -> Optional[Path]:
    program_file = Path(name)
    if program_file.is_file():
        return program_file
    with_suffix = Path(name + SOURCE_SUFFIX)
    if with_suffix.is_file():
        return with_suffix
    return None


def read_source(name: str) -> str:
    program_file = find_program(name)
    if program_file is None:
        print("The source code file could not be found/read.\nExiting...", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def fail(err: PathMakerError) -> None:
    print(f"Error. {err.message}\nExiting...", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Path_maker language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--cwd', metavar='DIR', help='starting working directory')
    parser.add_argument('--max-identifier-length', type=int, metavar='N',
                        help='longest directory name accepted (default: PATH_MAX)')
    parser.add_argument('--debug-file', default='debug.txt', help='file receiving debug output')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PMK_FILE', help='emit AST JSON for the given program')
    group.add_argument('--emit-tokens', metavar='PMK_FILE', help='write the token listing code.lex for the given program')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Path_maker program file (.pmk) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = find_program(args.emit_ast)
        source = read_source(args.emit_ast)
        try:
            ast_program = parse_program(source, args.max_identifier_length)
        except PathMakerError as e:
            fail(e)
        try:
            text = json.dumps(ast_to_obj(ast_program), ensure_ascii=False, indent=2)
        except RecursionError:
            fail(nesting_too_deep())
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(text)
        print(str(out_path))
        return

    # Token listing mode
    if args.emit_tokens:
        program_file = find_program(args.emit_tokens)
        source = read_source(args.emit_tokens)
        try:
            tokens = tokenize(source, args.max_identifier_length)
        except PathMakerError as e:
            fail(e)
        out_path = program_file.with_name('code.lex')
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(format_tokens(tokens))
        print(str(out_path))
        return

    cwd = os.path.abspath(args.cwd) if args.cwd else os.getcwd()
    if not os.path.isdir(cwd):
        print("Error getting current directory.\nExiting...", file=sys.stderr)
        sys.exit(1)

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            sys.exit(1)
        try:
            with open(ast_path, 'r', encoding='utf-8') as f:
                ast_program = ast_from_obj(json.load(f))
        except RecursionError:
            fail(nesting_too_deep())
        interpreter = Interpreter(cwd=cwd, debug_level=args.v, debug_file=args.debug_file)
        print(f"Current directory: {interpreter.cwd.path}")
        try:
            interpreter.run(ast_program)
        except PathMakerError as e:
            fail(e)
        return

    # Default: execute source file
    name = args.program
    if not name:
        try:
            name = input(f"Enter file name (without the {SOURCE_SUFFIX} extension): ").strip()
        except EOFError:
            name = ''
    if not name:
        parser.error('missing program file; or use --emit-ast/--emit-tokens/--ast')
    source = read_source(name)
    interpreter = Interpreter(
        cwd=cwd,
        debug_level=args.v,
        debug_file=args.debug_file,
        max_identifier_length=args.max_identifier_length,
    )
    print(f"Current directory: {interpreter.cwd.path}")
    try:
        interpreter.run_source(source)
    except PathMakerError as e:
        fail(e)


if __name__ == '__main__':
    main()
