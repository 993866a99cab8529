import os

from pathmaker.interpreter import Interpreter


def test_program_4_conditionals_and_nested_blocks(load_program, tmp_path, capsys):
    source = load_program('program_4.pmk')
    interp = Interpreter(cwd=str(tmp_path))
    interp.run_source(source)
    out = capsys.readouterr().out.strip().split('\n')
    assert out[0] == f'Path: {tmp_path / "missing"} does not exist. Command following if clause will not be executed.'
    assert out[1] == f"Success. Path: '{tmp_path / 'after'}' created with make command."
    assert 'Path exists. Ifnot command will not be executed.' in out
    assert sorted(os.listdir(tmp_path)) == ['after', 'created']
    assert sorted(os.listdir(tmp_path / 'created')) == ['here', 'inside']
    assert interp.cwd.path == str(tmp_path / 'created')
    assert [w.name for w in interp.warnings] == ['BranchNotTaken', 'BranchNotTaken']
