"""
Decorators
----------

This module defines some decorators that significantly reduce
the boilerplate when handling JSON IO. These are used on the
routes of the system to gracefully deserialize and serialize
the data coming in and out of the app.

Clients of this server cannot act on structured errors, so
any failure is reported as a bare ``500`` with a generic message
and the details go to the log instead.

.. note:: Annotating a route with ``@expects(None)`` or ``@returns(None)``
    is purely for clarity and has no effect.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from tracker import logger

GENERIC_ERROR_MESSAGE = "Internal Server Error"


def error_response() -> web.Response:
    """The response sent for any failure, regardless of its cause."""
    return web.Response(text=GENERIC_ERROR_MESSAGE, status=HTTPStatus.INTERNAL_SERVER_ERROR)


def expects(schema: Optional[Schema], into="data"):
    """
    A decorator that loads the JSON data supplied
    to the route with the given :class:`~marshmallow.Schema`.

    If the data loads, it is stored on the request under the key
    supplied to the ``into`` parameter, otherwise the error is
    logged and a generic server error is returned.

    .. code:: python

        @expects(LocationSubmitSchema(), "my_data")
        async def post(self):
            loaded_data = self.request["my_data"]

    :param schema: The schema to load with.
    :param into: The key to store the loaded data in.
    """

    # if schema is none, then bypass the decorator
    if schema is None:
        return lambda x: x

    # assert the schema is of the right type
    if not isinstance(schema, Schema):
        raise TypeError

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            if not self.request.body_exists or not self.request.content_type == "application/json":
                logger.error("Request to %s: %s is not JSON (%s)",
                             self.request.method, self.request.rel_url, self.request.content_type)
                return error_response()

            try:
                self.request[into] = schema.load(await self.request.json())
            except JSONDecodeError as err:
                logger.error("Could not parse supplied JSON: %s", err)
                return error_response()
            except ValidationError as err:
                logger.error("The request did not load properly: %s", err.messages)
                return error_response()

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK):
    """
    A decorator that dumps the data returned
    from the route through the given :class:`~marshmallow.Schema`.

    As long as this decorator is applied to the route,
    it is possible to return plain python objects or models.

    .. code:: python

        @returns(LocationReportSchema(many=True))
        async def get(self):
            return await get_recent_locations()

    :param schema: The schema that the output data is dumped with.
    :param return_code: The code to return.
    """

    # if no schema is defined, pass through
    if schema is None:
        return lambda x: x

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            response_data = await original_function(self, **kwargs)

            # the route already decided on its response (ie. an error)
            if isinstance(response_data, web.StreamResponse):
                return response_data

            try:
                return web.json_response(schema.dump(response_data), status=return_code)
            except (ValidationError, KeyError, TypeError, ValueError) as err:
                logger.error("We tried to send data back, but it came out wrong: %s", err)
                return error_response()

        return new_func

    return decorator
