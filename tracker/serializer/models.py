"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema
from marshmallow.fields import Integer, String, Float, DateTime


class LocationReportSchema(Schema):
    """The schema corresponding to the :class:`~tracker.models.location_report.LocationReport` model."""

    id = Integer(required=True)
    student_id = String(allow_none=True)
    latitude = Float(allow_none=True)
    longitude = Float(allow_none=True)
    timestamp = Integer(allow_none=True)
    created_at = DateTime(required=True)
