import os
from pathlib import Path

from aiohttp import web

PACKAGE_FOLDER = Path(os.path.dirname(__file__)) / ".."


async def index(request):
    """Lets the hosting platform know that the server is alive."""
    return web.Response(text="GPS Tracker Server is Online!")


async def monitor(request):
    """Sends the live map of the students."""
    return web.FileResponse(PACKAGE_FOLDER / "static" / "monitor.html")
