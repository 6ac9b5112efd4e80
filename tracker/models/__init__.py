"""
The models package contains all the models used on the server.

.. autoclasstree:: tracker.models
"""

from .location_report import LocationReport
