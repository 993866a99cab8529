import pytest

from pathmaker.errors import PathSyntaxError
from pathmaker.interpreter import Interpreter


def test_program_6_missing_semicolon_aborts(load_program, tmp_path, capsys):
    source = load_program('program_6.pmk')
    interp = Interpreter(cwd=str(tmp_path))
    with pytest.raises(PathSyntaxError) as exc:
        interp.run_source(source)
    assert exc.value.kind == PathSyntaxError.MISSING_SEMICOLON
    assert exc.value.line == 3
    # Statements before the error keep their effects.
    assert (tmp_path / 'first').is_dir()
    assert not (tmp_path / 'second').exists()
    assert not (tmp_path / 'third').exists()
