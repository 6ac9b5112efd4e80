"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from tracker import logger
from tracker.app import build_app
from tracker.config import database_url, port, server_mode
from tracker.version import __version__, name


def run():
    """Builds the app from the environment and serves it on all interfaces using uvloop."""
    logger.info(f'Starting {name} %s!', __version__)
    app = build_app(database_url)

    loop = uvloop.new_event_loop()
    if server_mode == "development" or server_mode == "testing":
        loop.set_debug(True)

    web.run_app(app, host="0.0.0.0", port=port, loop=loop)


if __name__ == '__main__':
    run()
