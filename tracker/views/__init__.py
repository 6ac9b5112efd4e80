"""
.. autoclasstree:: tracker.views

This package contains the server API for reporting
and viewing the locations of the students.

API Conventions
---------------

* Accept JSON with camelCase key naming (as sent by the mobile app)
* Return JSON with snake_case key naming (the column names)
* Respond with a plain text message on success or failure of a write

The API is intentionally tiny: one route receives locations, one route
serves the latest 100 of them, and the monitor page polls the latter.
"""

import aiohttp_cors
from aiohttp.abc import Application

from tracker import logger
from .base import CORS_OPTIONS
from .locations import LocationView, HistoryView
from .misc import index, monitor

views = [
    LocationView, HistoryView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url,
    along with the liveness route and the monitor page.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults=CORS_OPTIONS)

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)

    app.router.add_get("/", index, name="index")
    app.router.add_get("/monitor", monitor, name="monitor")
