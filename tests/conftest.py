import pytest

MOCK_FILE_CONTENT = b'This is a mock file content.'


@pytest.fixture
def test_folder(tmp_path):
    """Folder with two files and two empty subfolders."""
    folder = tmp_path / 't'
    folder.mkdir()
    (folder / 'file1.txt').write_bytes(b'')
    (folder / 'file2.txt').write_bytes(MOCK_FILE_CONTENT + b'\n')
    (folder / 'subfolder1').mkdir()
    (folder / 'subfolder2').mkdir()
    return folder


@pytest.fixture
def nested_folder(tmp_path):
    """Folder three levels deep with a file at every level."""
    root = tmp_path / 'root'
    level = root
    for depth in range(3):
        level = level / f'level{depth}'
        level.mkdir(parents=True)
        (level / f'leaf{depth}.bin').write_bytes(bytes([depth]) * (depth + 1))
    return root
