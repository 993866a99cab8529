# Path_maker language package
# This package provides a lexer, parser and interpreter for the Path_maker
# directory scripting language.
from .interpreter import run_program, compile_module, Interpreter, PathMakerError

__all__ = [
    'run_program',
    'compile_module',
    'Interpreter',
    'PathMakerError',
]
