"""JSON serialization/deserialization for Path_maker ASTs.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding, including the `PathExpression`
values they carry.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import Program, MakeStmt, GoStmt, IfStmt, IfNotStmt, Block
from .types import PathExpression


def path_to_obj(p: PathExpression) -> Dict[str, Any]:
    return {"up_count": p.up_count, "segments": list(p.segments)}


def path_from_obj(o: Dict[str, Any]) -> PathExpression:
    return PathExpression(int(o.get("up_count", 0)), tuple(o.get("segments", [])))


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, PathExpression):
        return {"__type__": "PathExpression", "value": path_to_obj(node)}

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, MakeStmt):
        return {"type": "MakeStmt", "path": ast_to_obj(node.path), "line": node.line}
    if isinstance(node, GoStmt):
        return {"type": "GoStmt", "path": ast_to_obj(node.path), "line": node.line}
    if isinstance(node, IfStmt):
        return {"type": "IfStmt", "path": ast_to_obj(node.path), "body": ast_to_obj(node.body), "line": node.line}
    if isinstance(node, IfNotStmt):
        return {"type": "IfNotStmt", "path": ast_to_obj(node.path), "body": ast_to_obj(node.body), "line": node.line}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements], "line": node.line}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "PathExpression":
        return path_from_obj(obj["value"])
    t = obj.get("type")
    line = int(obj.get("line", 0))
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "MakeStmt":
        return MakeStmt(path=ast_from_obj(obj["path"]), line=line)
    if t == "GoStmt":
        return GoStmt(path=ast_from_obj(obj["path"]), line=line)
    if t == "IfStmt":
        return IfStmt(path=ast_from_obj(obj["path"]), body=ast_from_obj(obj["body"]), line=line)
    if t == "IfNotStmt":
        return IfNotStmt(path=ast_from_obj(obj["path"]), body=ast_from_obj(obj["body"]), line=line)
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]], line=line)

    raise ValueError(f"Unknown AST node type: {t}")
