import os

import pytest


@pytest.fixture
def populated_dir(tmp_path):
    (tmp_path / 'a.txt').write_text('abc')
    (tmp_path / 'b.bin').write_bytes(b'\x00' * 10)
    (tmp_path / 'sub').mkdir()
    (tmp_path / 'sub' / 'nested.txt').write_text('not listed')
    return tmp_path


@pytest.fixture
def undecodable_dir(populated_dir):
    """populated_dir plus a file whose name isn't valid UTF-8."""
    if os.name == 'nt':
        pytest.skip('non UTF-8 file names not supported')
    try:
        fd = os.open(os.path.join(os.fsencode(str(populated_dir)), b'bad\xff.txt'), os.O_CREAT | os.O_WRONLY)
    except OSError:
        pytest.skip('file system does not accept non UTF-8 names')
    os.close(fd)
    return populated_dir


@pytest.fixture(autouse=True)
def _no_color_env(monkeypatch):
    monkeypatch.delenv('NO_COLOR', raising=False)
