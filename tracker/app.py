"""
App
-----
"""

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from tracker import logger
from tracker.config import server_mode, api_root, sentry_dsn, database_ssl
from tracker.middleware import error_middleware
from tracker.signals import register_signals
from tracker.version import __version__
from tracker.views import register_views


def build_app(db_uri=None, use_ssl=database_ssl):
    """Sets up the app with its database, routes, and error reporting."""
    app = web.Application(middlewares=[error_middleware])

    app['database_uri'] = db_uri if db_uri is not None else 'sqlite://:memory:'
    app['database_ssl'] = use_ssl

    register_signals(app)
    register_views(app, api_root)

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn is not None:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"tracker@{__version__}",
            integrations=[AioHttpIntegration()]
        )

    return app
