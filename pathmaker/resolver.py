"""Resolution of path expressions against a working directory."""

import os

from pathmaker.types import PathExpression


def resolve(base: str, expr: PathExpression) -> str:
    """Resolve `expr` relative to the absolute directory `base`.

    Each up-reference drops the last component; at the filesystem root it
    has no effect. Segments are then appended in order. `base` is not
    modified and the result is a normalized absolute path string.
    """
    resolved = os.path.normpath(base)
    for _ in range(expr.up_count):
        resolved = os.path.dirname(resolved)
    for segment in expr.segments:
        resolved = os.path.join(resolved, segment)
    return resolved
