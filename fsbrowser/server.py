import logging
import os
from typing import Any, Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from fsbrowser.asyncio.connector import AsyncConnector
from fsbrowser.asyncio.local import AsyncLocalConnector
from fsbrowser.config import ServerConfig

logger = logging.getLogger(__name__)


def content_disposition(filename: str) -> str:
    """Build attachment header value, with RFC 6266 encoding for non-ASCII names."""
    if filename.isascii():
        return f'attachment; filename={filename}'
    fallback = filename.encode('ascii', 'replace').decode('ascii').replace('"', '_')
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'


def create_app(config: ServerConfig, connector: Optional[AsyncConnector] = None) -> FastAPI:
    """Creates HTTP application serving configured folder.

    Parameters
    ----------
    config : ServerConfig
        Server configuration.
    connector : AsyncConnector, optional
        File system connector, local one by default.

    Returns
    -------
    FastAPI
        Application with `/folder-metadata` and `/file-content` routes.
    """
    app = FastAPI(title='fsbrowser')
    fs = connector if connector is not None else AsyncLocalConnector()

    @app.get('/folder-metadata')
    async def get_folder_metadata() -> dict[str, Any]:
        if not config.root:
            raise HTTPException(status_code=400, detail='No folder path provided')
        try:
            metadata = await fs.walk(config.root, sort=config.sort_children)
        except OSError as err:
            logger.error("failed to walk '%s': %s", config.root, err)
            raise HTTPException(status_code=500, detail=f'Failed to get folder metadata: {err}')
        return metadata.to_dict()

    @app.get('/file-content')
    async def get_file_content(file_name: str = Query('', alias='fileName')) -> Response:
        if not file_name:
            raise HTTPException(status_code=400, detail="Missing 'fileName' query parameter")
        path = os.path.join(config.root, file_name)
        try:
            content = await fs.read(path)
        except OSError as err:
            logger.error("failed to read '%s': %s", path, err)
            raise HTTPException(status_code=500, detail=f'Failed to read file content: {err}')
        headers = {'Content-Disposition': content_disposition(os.path.basename(file_name))}
        return Response(content=content, media_type='application/octet-stream', headers=headers)

    return app
