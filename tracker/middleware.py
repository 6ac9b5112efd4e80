"""
Middleware
----------
"""

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from tracker import logger
from tracker.serializer import error_response


@middleware
async def error_middleware(request: Request, handler):
    """
    Ensures that any unhandled error in a route is logged
    and reported as a generic server error, instead of leaking the traceback.
    """

    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as error:
        logger.exception("Unhandled error in %s: %s", request.rel_url, error)
        return error_response()
