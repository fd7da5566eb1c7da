from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import aiofiles
import aiofiles.os

from fsbrowser.asyncio.connector import AsyncConnector
from fsbrowser.utils.entry import MetadataNode


class AsyncLocalConnector(AsyncConnector):
    """Async local file system connector."""

    @classmethod
    @asynccontextmanager
    async def connect(cls) -> AsyncGenerator['AsyncLocalConnector', None]:
        """Connects to file system.

        Yields
        -------
        AsyncLocalConnector
            Class instance
        """
        yield cls()

    @asynccontextmanager
    async def open(self, path: str, mode: str = 'rb') -> Any:
        if mode not in ['r', 'rb', 'rt']:
            raise ValueError(f"invalid mode: '{mode}'")
        async with aiofiles.open(path, mode) as f:
            yield f

    async def stat(self, path: str) -> MetadataNode:
        return MetadataNode.from_stat(path, await aiofiles.os.stat(path))

    async def listdir(self, path: str) -> list[str]:
        return await aiofiles.os.listdir(path)
