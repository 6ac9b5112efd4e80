"""
Locations
=========

Reads and writes the location reports sent in by the students.
Every function issues a single statement, so no transactions are needed.
"""
import asyncio
from typing import List, Optional

from asyncpg import PostgresError, InterfaceError
from tortoise.exceptions import BaseORMException

from tracker.config import history_limit
from tracker.models import LocationReport

STORE_ERRORS = (BaseORMException, PostgresError, InterfaceError, OSError, asyncio.TimeoutError)
"""The errors raised by the ORM or the database driver when a statement cannot be run."""


class LocationStoreError(Exception):
    """
    Raised when the location store cannot be reached,
    or a statement against it fails.
    """


async def record_location(
    student_id: Optional[str], latitude: Optional[float], longitude: Optional[float], timestamp: Optional[int]
) -> LocationReport:
    """
    Appends a single location report.

    There is no de-duplication: recording the same report twice creates two rows.

    :raises LocationStoreError: If the report could not be written.
    """
    try:
        return await LocationReport.create(
            student_id=student_id, latitude=latitude, longitude=longitude, timestamp=timestamp
        )
    except STORE_ERRORS as error:
        raise LocationStoreError(*error.args) from error


async def get_recent_locations(limit: int = history_limit) -> List[LocationReport]:
    """
    Gets the most recently received location reports, newest first.

    Reports received within the same clock tick are returned in reverse insertion order.

    :param limit: The maximum number of reports to return.
    :raises LocationStoreError: If the reports could not be read.
    """
    try:
        return await LocationReport.all().order_by("-created_at", "-id").limit(limit)
    except STORE_ERRORS as error:
        raise LocationStoreError(*error.args) from error
