import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir() -> pathlib.Path:
    return DATA_DIR
