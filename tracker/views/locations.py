"""
Location Related Views
--------------------------

Handles receiving the location reports from the mobile app,
and handing the latest of them to the monitor.
"""
from aiohttp import web

from tracker import logger
from tracker.serializer import expects, returns, error_response
from tracker.serializer.misc import LocationSubmitSchema
from tracker.serializer.models import LocationReportSchema
from tracker.service.access.locations import record_location, get_recent_locations, LocationStoreError
from tracker.views.base import BaseView


class LocationView(BaseView):
    """
    Receives a location report from the mobile app.
    """
    url = "/location"
    name = "location"

    @expects(LocationSubmitSchema())
    async def post(self):
        data = self.request["data"]
        try:
            await record_location(data["student_id"], data["latitude"], data["longitude"], data["timestamp"])
        except LocationStoreError as error:
            logger.error("Insert Error: %s", error)
            return error_response()

        logger.info("Location saved for Student ID: %s", data["student_id"])
        return web.Response(text="Data saved successfully")


class HistoryView(BaseView):
    """
    Gets the most recent location reports, newest first.
    Any query parameters are ignored.
    """
    url = "/history"
    name = "history"

    @returns(LocationReportSchema(many=True))
    async def get(self):
        try:
            return await get_recent_locations()
        except LocationStoreError as error:
            logger.error("Fetch Error: %s", error)
            return error_response()
