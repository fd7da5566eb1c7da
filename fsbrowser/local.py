import os
from contextlib import contextmanager
from typing import IO, Iterator

from fsbrowser.connector import Connector
from fsbrowser.utils.entry import MetadataNode


class LocalConnector(Connector):
    """Local file system connector."""

    @contextmanager
    def open(self, path: str, mode: str = 'rb') -> Iterator[IO]:
        if mode not in ['r', 'rb', 'rt']:
            raise ValueError(f"invalid mode: '{mode}'")
        with open(path, mode) as f:
            yield f

    def stat(self, path: str) -> MetadataNode:
        return MetadataNode.from_stat(path, os.stat(path))

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)
