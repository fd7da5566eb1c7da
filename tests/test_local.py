import os

import pytest

from fsbrowser.local import LocalConnector
from tests.conftest import MOCK_FILE_CONTENT


@pytest.fixture
def connector():
    return LocalConnector()


def test_walk_folder(connector, test_folder):
    node = connector.walk(str(test_folder))
    assert node.name == 't'
    assert node.is_directory is True
    assert [child.name for child in node.children] == ['file1.txt', 'file2.txt', 'subfolder1', 'subfolder2']
    file1, file2, sub1, sub2 = node.children
    assert file1.is_directory is False and file1.children is None and file1.size == 0
    assert file2.is_directory is False and file2.children is None and file2.size == 29
    assert sub1.is_directory is True and sub1.children == []
    assert sub2.is_directory is True and sub2.children == []


def test_walk_directory_size_is_raw(connector, test_folder):
    node = connector.walk(str(test_folder))
    assert node.size == os.stat(test_folder).st_size


def test_walk_nested(connector, nested_folder):
    node = connector.walk(str(nested_folder))
    depth = 0
    while True:
        dirs = [child for child in node.children if child.is_directory]
        files = [child for child in node.children if not child.is_directory]
        if depth > 0:
            assert [f.name for f in files] == [f'leaf{depth - 1}.bin']
            assert files[0].size == depth
        if not dirs:
            break
        assert len(dirs) == 1
        node = dirs[0]
        depth += 1
    assert depth == 3


def test_walk_file(connector, test_folder):
    node = connector.walk(str(test_folder / 'file2.txt'))
    assert node.name == 'file2.txt'
    assert node.is_directory is False
    assert node.children is None
    assert 'children' not in node.to_dict()


def test_walk_unsorted_keeps_listing_order(connector, test_folder):
    node = connector.walk(str(test_folder), sort=False)
    assert [child.name for child in node.children] == os.listdir(test_folder)


def test_walk_missing_path(connector, tmp_path):
    with pytest.raises(FileNotFoundError):
        connector.walk(str(tmp_path / 'missing'))


def test_walk_fails_on_child_error(connector, test_folder, monkeypatch):
    original_stat = LocalConnector.stat

    def failing_stat(self, path):
        if path.endswith('subfolder1'):
            raise PermissionError(13, 'Permission denied', path)
        return original_stat(self, path)

    monkeypatch.setattr(LocalConnector, 'stat', failing_stat)
    with pytest.raises(PermissionError):
        connector.walk(str(test_folder))


def test_read(connector, tmp_path):
    path = tmp_path / 'test_file.txt'
    path.write_bytes(MOCK_FILE_CONTENT)
    content = connector.read(str(path))
    assert content == MOCK_FILE_CONTENT
    assert len(content) == 28


def test_read_binary(connector, tmp_path):
    data = bytes(range(256)) * 10
    path = tmp_path / 'data.bin'
    path.write_bytes(data)
    assert connector.read(str(path)) == data


def test_read_directory(connector, test_folder):
    with pytest.raises(OSError):
        connector.read(str(test_folder))


def test_read_missing(connector, tmp_path):
    with pytest.raises(FileNotFoundError):
        connector.read(str(tmp_path / 'missing.txt'))


def test_iter_chunks(connector, tmp_path):
    data = os.urandom(1000)
    path = tmp_path / 'data.bin'
    path.write_bytes(data)
    chunks = list(connector.iter_chunks(str(path), chunk_size=300))
    assert [len(chunk) for chunk in chunks] == [300, 300, 300, 100]
    assert b''.join(chunks) == connector.read(str(path))


def test_open_rejects_write_mode(connector, tmp_path):
    with pytest.raises(ValueError):
        with connector.open(str(tmp_path / 'x'), 'wb'):
            pass


def test_walk_fails_on_listdir_error(connector, test_folder, monkeypatch):
    original_listdir = LocalConnector.listdir

    def failing_listdir(self, path):
        if path.endswith('subfolder2'):
            raise PermissionError(13, 'Permission denied', path)
        return original_listdir(self, path)

    monkeypatch.setattr(LocalConnector, 'listdir', failing_listdir)
    with pytest.raises(PermissionError):
        connector.walk(str(test_folder))
