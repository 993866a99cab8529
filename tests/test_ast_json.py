import json

import pytest

from pathmaker.ast_json import ast_to_obj, ast_from_obj
from pathmaker.parser import parse_program


def test_program_survives_json(load_program):
    program = parse_program(load_program('program_4.pmk'))
    obj = json.loads(json.dumps(ast_to_obj(program)))
    assert ast_from_obj(obj) == program


def test_path_encoding():
    obj = ast_to_obj(parse_program('go <*/a/b>;'))
    assert obj['body'][0]['path'] == {'__type__': 'PathExpression', 'value': {'up_count': 1, 'segments': ['a', 'b']}}


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})
