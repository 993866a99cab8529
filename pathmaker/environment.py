import os

from pathmaker.resolver import resolve
from pathmaker.types import PathExpression


class WorkingDirectory:
    """The current directory of one interpreter run.

    Relative path expressions resolve against `path`. Only a successful
    `go` statement moves it, through `change_to`.
    """
    def __init__(self, path: str):
        if not os.path.isabs(path):
            raise ValueError(f'working directory must be absolute: {path!r}')
        self.path = os.path.normpath(path)

    def resolve(self, expr: PathExpression) -> str:
        return resolve(self.path, expr)

    def change_to(self, path: str):
        self.path = path

    def __repr__(self) -> str:
        return f"WorkingDirectory({self.path!r})"
