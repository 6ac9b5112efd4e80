"""
Signals
-------

Defines the signals that the aiohttp server uses
to set up and tear down its connection to the database.

Each signal must accept an the ``app`` argument.
"""
import ssl

from aiohttp.abc import Application
from tortoise import Tortoise
from tortoise.backends.base.config_generator import generate_config

from tracker import logger


def build_database_config(db_url: str, use_ssl: bool = False) -> dict:
    """
    Builds the tortoise configuration for the given database url.

    When ``use_ssl`` is set, postgres connections are made over TLS
    without verifying the server's certificate, which hosted
    databases behind a pooler need.
    """
    config = generate_config(db_url, app_modules={'models': ['tracker.models']})

    connection = config['connections']['default']
    if use_ssl and connection['engine'] == 'tortoise.backends.asyncpg':
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        connection['credentials']['ssl'] = context

    return config


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await Tortoise.close_connections()


async def initialize_database(app: Application):
    """
    Initializes and generates the schema for our database.

    A failure is logged but does not stop the server. It keeps
    answering, and the routes that need the database fail until it is back.
    """
    try:
        await Tortoise.init(config=build_database_config(app['database_uri'], app.get('database_ssl', False)))
        await Tortoise.generate_schemas(safe=True)
    except Exception as error:  # any failure here must leave the server running
        logger.error("Database Initialization Error: %s", error)
    else:
        logger.info("Database table is ready")


def register_signals(app, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)

    app.on_cleanup.append(close_database_connections)
