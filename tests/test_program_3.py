from pathmaker.interpreter import Interpreter


def test_program_3_parent_references(load_program, tmp_path, capsys):
    source = load_program('program_3.pmk')
    interp = Interpreter(cwd=str(tmp_path))
    interp.run_source(source)
    out = capsys.readouterr().out.strip().split('\n')
    assert out[-1] == f"Success. Path: '{tmp_path / 'sibling' / 'child'}' created with make command."
    assert f'Current directory is now changed to: {tmp_path}' in out
    assert (tmp_path / 'a' / 'b').is_dir()
    assert (tmp_path / 'sibling' / 'child').is_dir()
    assert interp.cwd.path == str(tmp_path)
