"""
File lookup for the static asset server: path resolution with a
traversal guard, MIME type derivation and reading.
"""

import os
import logging
from typing import NamedTuple


logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = 'index.html'
DEFAULT_MIME_TYPE = 'application/octet-stream'

MIME_TYPES = {
    '.html': 'text/html',
    '.css': 'text/css',
    '.js': 'application/javascript',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.gif': 'image/gif',
    '.ico': 'image/x-icon',
}


class ForbiddenPath(Exception):
    pass


class AssetNotFound(Exception):
    pass


class Asset(NamedTuple):
    content: bytes
    mime_type: str


def resolve_asset_path(public_root: str, url_path: str) -> str:
    """
    Maps a request path onto a file path inside the public root.

    The check is purely lexical: nothing on disk is touched, so a path
    that escapes the root is rejected before any read happens.
    """

    root = os.path.abspath(public_root)
    if not url_path or url_path == '/':
        url_path = '/' + DEFAULT_DOCUMENT

    candidate = os.path.abspath(os.path.join(root, '.' + url_path))

    # commonpath compares whole components, so "public2" is not inside "public"
    if os.path.commonpath([root, candidate]) != root:
        raise ForbiddenPath(url_path)

    return candidate


def guess_mime_type(path: str) -> str:
    """
    Looks the lower-cased extension up in MIME_TYPES, octet-stream otherwise.
    """

    ext = os.path.splitext(path)[1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def load_asset(public_root: str, url_path: str) -> Asset:
    """
    Reads a file from the public root together with its content type.

    Raises ForbiddenPath for traversal attempts and AssetNotFound for any
    read failure (missing file, directory, permissions).
    """

    file_path = resolve_asset_path(public_root, url_path)

    try:
        with open(file_path, 'rb') as f:
            content = f.read()
    except (OSError, ValueError) as e:
        logger.debug("Cannot read %s: %s", file_path, e)
        raise AssetNotFound(url_path) from e

    return Asset(content=content, mime_type=guess_mime_type(file_path))
