"""
Base
------------------------

The base view for the API. Every API view is registered
under the api root and accepts cross origin requests, since
the mobile app and monitor may be served from other hosts.
"""

from typing import Optional

from aiohttp.abc import Application
from aiohttp.web import View, AbstractRoute
from aiohttp_cors import CorsConfig, CorsViewMixin, ResourceOptions

CORS_OPTIONS = {
    "*": ResourceOptions(
        allow_credentials=True,
        expose_headers="*",
        allow_headers="*",
        allow_methods="*",
    )
}
"""Any origin may call any method on the api."""


class ViewConfigurationError(Exception):
    """
    Raised if the view doesn't provide a URL, or is given CORS before a route.
    """


class BaseView(View, CorsViewMixin):
    """
    The base view that all API views extend.
    """

    url: str
    name: Optional[str]
    route: AbstractRoute

    cors_config = CORS_OPTIONS

    @classmethod
    def register_route(cls, app: Application, base: Optional[str] = None):
        """
        Adds the view to the app's router, under ``base`` if given.

        :raises ViewConfigurationError: If the URL hasn't been set on the given view.
        """
        if not hasattr(cls, "url"):
            raise ViewConfigurationError(f"{cls.__name__} has no URL!")

        url = cls.url if base is None else base + cls.url
        cls.route = app.router.add_view(url, cls, name=getattr(cls, "name", None))

    @classmethod
    def enable_cors(cls, cors: CorsConfig):
        """Enables CORS on the view's route."""
        if not hasattr(cls, "route"):
            raise ViewConfigurationError("No route assigned. Please register the route first.")
        cors.add(cls.route)
