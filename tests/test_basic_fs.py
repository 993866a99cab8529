import pytest

from pathmaker.errors import PathMakerError
from pathmaker.std.fs import BasicFS
from pathmaker.types import PathStatus


def test_stat(tmp_path):
    fs = BasicFS()
    (tmp_path / 'dir').mkdir()
    (tmp_path / 'file').write_text('x')
    assert fs.stat(str(tmp_path / 'dir')) is PathStatus.DIRECTORY
    assert fs.stat(str(tmp_path / 'file')) is PathStatus.NOT_A_DIRECTORY
    assert fs.stat(str(tmp_path / 'nope')) is PathStatus.ABSENT
    assert fs.stat(str(tmp_path / 'file' / 'below')) is PathStatus.ABSENT


def test_locate_ignores_case(tmp_path):
    fs = BasicFS()
    (tmp_path / 'Data' / 'Raw').mkdir(parents=True)
    assert fs.locate(str(tmp_path / 'data' / 'raw')) == str(tmp_path / 'Data' / 'Raw')
    assert fs.locate(str(tmp_path / 'data' / 'cooked')) is None


def test_create_all_reuses_existing_prefix(tmp_path):
    fs = BasicFS()
    (tmp_path / 'Data').mkdir()
    created = fs.create_all(str(tmp_path / 'data' / 'new' / 'deep'))
    assert created == str(tmp_path / 'Data' / 'new' / 'deep')
    assert (tmp_path / 'Data' / 'new' / 'deep').is_dir()


def test_create_all_is_idempotent(tmp_path):
    fs = BasicFS()
    fs.create_all(str(tmp_path / 'a' / 'b'))
    assert fs.create_all(str(tmp_path / 'a' / 'b')) == str(tmp_path / 'a' / 'b')


def test_create_all_through_a_file_fails(tmp_path):
    fs = BasicFS()
    (tmp_path / 'file').write_text('x')
    with pytest.raises(PathMakerError) as exc:
        fs.create_all(str(tmp_path / 'file' / 'sub'))
    assert exc.value.err.name == 'IoError'
