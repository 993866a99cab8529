from pathmaker.interpreter import Interpreter


def test_program_2_go_changes_directory(load_program, tmp_path, capsys):
    source = load_program('program_2.pmk')
    interp = Interpreter(cwd=str(tmp_path))
    interp.run_source(source)
    out = capsys.readouterr().out.strip().split('\n')
    workspace = tmp_path / 'workspace'
    assert out == [
        f"Success. Path: '{workspace / 'src'}' created with make command.",
        'Path exists. Go statement executed.',
        f'Current directory is now changed to: {workspace}',
        f"Success. Path: '{workspace / 'docs'}' created with make command.",
        f'Path: {workspace / "nowhere"} does not exist. Go statement cannot be executed',
        f"Success. Path: '{workspace / 'build'}' created with make command.",
    ]
    # The failed go left the working directory where it was.
    assert interp.cwd.path == str(workspace)
    assert (workspace / 'build').is_dir()
    assert not (tmp_path / 'build').exists()
