import argparse
import dataclasses
import json
import logging
import sys
from typing import Optional

import uvicorn
from tqdm.auto import tqdm

from fsbrowser.config import ServerConfig
from fsbrowser.connector import DEFAULT_CHUNK_SIZE, Connector
from fsbrowser.local import LocalConnector
from fsbrowser.server import create_app

logger = logging.getLogger(__name__)


def serve(config: ServerConfig) -> None:
    """Run HTTP server until interrupted.

    Parameters
    ----------
    config : ServerConfig
        Server configuration.
    """
    logging.getLogger().setLevel(config.log_level.upper())
    app = create_app(config)
    logger.info('Server is running on http://localhost:%d', config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def tree(connector: Connector, path: str, sort: bool = True, indent: Optional[int] = 2) -> str:
    """Render metadata tree as JSON.

    Parameters
    ----------
    connector : Connector
        File system connector.
    path : str
        File or directory path.
    sort : bool, default=True
        Sort children by name.
    indent : int, optional
        JSON indent.

    Returns
    -------
    str
        JSON document.
    """
    return json.dumps(connector.walk(path, sort=sort).to_dict(), indent=indent)


def get(connector: Connector, path: str, destination: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Copy file content to local destination.

    Parameters
    ----------
    connector : Connector
        File system connector.
    path : str
        Source file path.
    destination : str
        Destination file path.
    chunk_size : int, default=1024 * 1024 * 16
        Chunk size in bytes.

    Returns
    -------
    int
        Copied bytes.
    """
    total = connector.stat(path).size
    chunks = connector.iter_chunks(path, chunk_size)
    # source is opened by the first chunk, before destination is created
    chunk = next(chunks, b'')
    copied = 0
    with tqdm(total=total, desc='Bytes', unit='B', unit_scale=True) as bytes_pbar:
        with open(destination, 'wb') as dst_file:
            while chunk:
                dst_file.write(chunk)
                copied += len(chunk)
                bytes_pbar.update(len(chunk))
                chunk = next(chunks, b'')
    return copied


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--log_level', type=str, default=None, help='logging level name')
    parser = argparse.ArgumentParser(
        prog='fsbrowser',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='to see action help message:\n  fsbrowser serve -h\n  fsbrowser tree -h\n  fsbrowser get -h'
    )
    subparsers = parser.add_subparsers(dest='action')
    serve_parser = subparsers.add_parser('serve', parents=[common], help='serve folder over HTTP')
    tree_parser = subparsers.add_parser('tree', parents=[common], help='print folder metadata as JSON')
    get_parser = subparsers.add_parser('get', parents=[common], help='copy file content')
    subparsers.required = True
    serve_parser.add_argument('folder_path', nargs='?', type=str, help='served folder path')
    serve_parser.add_argument('port', nargs='?', type=int, help='port to listen on')
    serve_parser.add_argument('--host', type=str, default=None, help='bind address')
    serve_parser.add_argument('--config_path', type=str, default=None, help='path to configuration file')
    tree_parser.add_argument('path', type=str, help='file or folder path')
    tree_parser.add_argument('--unsorted', action='store_false', dest='sort', help='keep listing order')
    tree_parser.add_argument('--indent', type=int, default=2, help='JSON indent')
    get_parser.add_argument('path', type=str, help='source file path')
    get_parser.add_argument('destination', type=str, help='destination file path')
    get_parser.add_argument('--chunk_size', type=int, default=DEFAULT_CHUNK_SIZE, help='chunk size in bytes')
    return parser


def build_config(args: argparse.Namespace) -> ServerConfig:
    """Merge configuration file with command line arguments.

    Command line arguments take precedence over configuration file values.
    """
    config = ServerConfig.from_yaml(args.config_path) if args.config_path else ServerConfig()
    overrides = {
        'root': args.folder_path,
        'port': args.port,
        'host': args.host,
        'log_level': args.log_level,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    try:
        if args.action == 'serve':
            try:
                config = build_config(args)
            except (TypeError, ValueError) as err:
                parser.error(str(err))
            if not config.root:
                parser.error('No folder path provided')
            serve(config)
        elif args.action == 'tree':
            print(tree(LocalConnector(), args.path, sort=args.sort, indent=args.indent))
        elif args.action == 'get':
            copied = get(LocalConnector(), args.path, args.destination, args.chunk_size)
            logger.info("copied %d bytes to '%s'", copied, args.destination)
        else:
            raise ValueError(f"invalid action: '{args.action}'")
    except OSError as err:
        print(f'Error: {err}', file=sys.stderr)
        sys.exit(1)
