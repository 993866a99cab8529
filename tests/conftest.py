from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / 'examples'


@pytest.fixture
def load_program():
    def _load(name: str) -> str:
        with open(EXAMPLES_DIR / name, 'r', encoding='utf-8') as f:
            return f.read()
    return _load
