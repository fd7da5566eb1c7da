import logging
import os
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Iterator

from fsbrowser.utils.entry import MetadataNode

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024 * 16


class Connector(ABC):
    """Abstract class for read-only connector."""

    @abstractmethod
    def open(self, path: str, mode: str) -> AbstractContextManager[Any]:
        """Open file.

        Parameters
        ----------
        path : str
            Path to file.
        mode : str
            Open mode.

        Returns
        -------
        Any
            Readable file-like object.
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> MetadataNode:
        """Get entry metadata.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        MetadataNode
            Entry metadata without children.
        """
        pass

    @abstractmethod
    def listdir(self, path: str) -> list[str]:
        """List directory content.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        list[str]
            Names of immediate directory entries.
        """
        pass

    def walk(self, path: str, sort: bool = True) -> MetadataNode:
        """Build metadata tree.

        Any error raised while reading an entry aborts the whole walk.

        Parameters
        ----------
        path : str
            File or directory path, included in the result as tree root.
        sort : bool, default=True
            Sort children by name instead of keeping listing order.

        Returns
        -------
        MetadataNode
            Root node, with children for directories.
        """
        node = self.stat(path)
        if node.is_directory:
            names = self.listdir(path)
            if sort:
                names = sorted(names)
            logger.debug("walking '%s' (%d entries)", path, len(names))
            node.children = [self.walk(os.path.join(path, name), sort=sort) for name in names]
        return node

    def read(self, path: str) -> bytes:
        """Read file content.

        Parameters
        ----------
        path : str
            Path to file.

        Returns
        -------
        bytes
            Full file content.
        """
        with self.open(path, 'rb') as f:
            content = f.read()
        logger.debug("read %d bytes from '%s'", len(content), path)
        return content

    def iter_chunks(self, path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Read file content by chunks.

        Parameters
        ----------
        path : str
            Path to file.
        chunk_size : int, default=1024 * 1024 * 16
            Max chunk size in bytes.

        Yields
        ------
        bytes
            Next file chunk.
        """
        with self.open(path, 'rb') as f:
            chunk = f.read(chunk_size)
            while chunk:
                yield chunk
                chunk = f.read(chunk_size)
