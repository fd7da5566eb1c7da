import logging
import os
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator

from fsbrowser.connector import DEFAULT_CHUNK_SIZE
from fsbrowser.utils.entry import MetadataNode

logger = logging.getLogger(__name__)


class AsyncConnector(ABC):
    """Abstract class for async read-only connector."""

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator['AsyncConnector', None]:
        """Connects to file system.

        Yields
        -------
        AsyncConnector
            Class instance
        """
        yield self

    @abstractmethod
    @asynccontextmanager
    async def open(self, path: str, mode: str) -> AsyncIterator[Any]:
        yield None

    @abstractmethod
    async def stat(self, path: str) -> MetadataNode:
        pass

    @abstractmethod
    async def listdir(self, path: str) -> list[str]:
        pass

    async def walk(self, path: str, sort: bool = True) -> MetadataNode:
        """Build metadata tree.

        Children are walked one by one, so their order is preserved.

        Parameters
        ----------
        path : str
            File or directory path.
        sort : bool, default=True
            Sort children by name.

        Returns
        -------
        MetadataNode
            Root node.
        """
        node = await self.stat(path)
        if node.is_directory:
            names = await self.listdir(path)
            if sort:
                names = sorted(names)
            logger.debug("walking '%s' (%d entries)", path, len(names))
            children = []
            for name in names:
                children.append(await self.walk(os.path.join(path, name), sort=sort))
            node.children = children
        return node

    async def read(self, path: str) -> bytes:
        async with self.open(path, 'rb') as f:
            content = await f.read()
        logger.debug("read %d bytes from '%s'", len(content), path)
        return content

    async def iter_chunks(self, path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[bytes]:
        async with self.open(path, 'rb') as f:
            chunk = await f.read(chunk_size)
            while chunk:
                yield chunk
                chunk = await f.read(chunk_size)
