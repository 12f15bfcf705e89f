import os

import pytest

from domquery import parse

_dir = os.path.abspath(os.path.dirname(__file__))
_testdata = os.path.join(_dir, "test_data")


@pytest.fixture
def index_path():
    return os.path.join(_testdata, "index.html")


@pytest.fixture
def document(index_path):
    with open(index_path, "rb") as f:
        return parse(f)
