from fsbrowser.asyncio.local import AsyncLocalConnector
from fsbrowser.local import LocalConnector
from fsbrowser.utils.entry import MetadataNode

__all__ = ['AsyncLocalConnector', 'LocalConnector', 'MetadataNode']
