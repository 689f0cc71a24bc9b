import os

import pytest


@pytest.fixture
def data():
    return bytes(range(256)) * 100 + b"tail"


@pytest.fixture
def source_file(tmp_path, data):
    path = tmp_path / "source.bin"
    path.write_bytes(data)
    return path


@pytest.fixture
def umask():
    value = os.umask(0)
    os.umask(value)
    return value
