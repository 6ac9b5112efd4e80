"""
Location Report
---------------------------
"""

from tortoise import Model, fields


class LocationReport(Model):
    """
    A location report places a student
    at some set of coordinates
    at a specific point in time.

    Reports are append-only: they are never updated or deleted.

    .. note:: The ``timestamp`` is the client's clock and is stored as given.
        Only ``created_at`` (the time the server received the report)
        is used for ordering.
    """
    id = fields.IntField(primary_key=True)
    student_id = fields.TextField(null=True)
    latitude = fields.FloatField(null=True)
    longitude = fields.FloatField(null=True)
    timestamp = fields.BigIntField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "locations"

    def __str__(self):
        return f"[LocationReport {self.id}: {self.student_id} ({self.latitude}, {self.longitude})]"
