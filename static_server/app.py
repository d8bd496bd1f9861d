"""
Static Asset Server.

Serves files from the public directory with a fixed extension-to-MIME table.
Paths that escape the public directory are answered with 403 before any read.
"""

import logging
from typing import Optional
from flask import Flask, Response, current_app, request

from static_server.assets import AssetNotFound, ForbiddenPath, load_asset
from static_server.config import load_settings


logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


def create_app(public_dir: Optional[str] = None) -> Flask:
    """
    Builds the Flask application.

    Flask's own static handling is switched off: every path goes through
    load_asset so the traversal guard and MIME table apply uniformly.
    """

    app = Flask(__name__, static_folder=None)
    app.config['PUBLIC_DIR'] = public_dir or load_settings().public_dir

    @app.route('/', defaults={'asset_path': ''})
    @app.route('/<path:asset_path>')
    def serve_asset(asset_path: str) -> Response:
        """
        Any path under the public root; "/" maps to the default document.
        """

        asset = load_asset(current_app.config['PUBLIC_DIR'], '/' + asset_path)
        return Response(asset.content, status=200, content_type=asset.mime_type)

    @app.errorhandler(ForbiddenPath)
    def forbidden(error: ForbiddenPath) -> Response:
        logger.warning("Blocked path traversal attempt: %s", request.path)
        return Response('Forbidden', status=403, content_type='text/plain')

    @app.errorhandler(AssetNotFound)
    def not_found(error: AssetNotFound) -> Response:
        return Response('Not Found', status=404, content_type='text/plain')

    return app


def main() -> None:
    """
    Runs the development server. For `flask run` use the factory:
    flask --app static_server.app:create_app run
    """

    settings = load_settings()
    configure_logging(settings.log_level)

    server = create_app(settings.public_dir)

    print(f"Server running at http://localhost:{settings.port}/")
    print(f"Serving files from {settings.public_dir}")
    server.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
