import os


def normalize_database_url(url: str) -> str:
    """Rewrites the ``postgresql`` scheme given by most hosts into the one tortoise understands."""
    if url.startswith("postgresql://"):
        url = url.replace("postgresql", "postgres", 1)
    return url


def is_truthy(value) -> bool:
    return value is not None and value.strip().lower() in ("1", "true", "yes", "on")


server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

database_url = normalize_database_url(os.getenv("DATABASE_URL", "sqlite://db.sqlite3"))
"""The connection string of the location database."""

database_ssl = is_truthy(os.getenv("DATABASE_SSL"))
"""Whether to connect to postgres over TLS (without verifying the certificate)."""

port = int(os.getenv("PORT", "3000"))
"""The port the server listens on."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN, if error reporting is wanted."""

api_root = "/api"
"""The base url for the api."""

history_limit = 100
"""The maximum number of locations returned by the history route."""
