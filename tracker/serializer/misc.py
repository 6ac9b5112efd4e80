from marshmallow import Schema, EXCLUDE
from marshmallow.fields import Float

from tracker.serializer.fields import CoercedString, WholeNumber


class LocationSubmitSchema(Schema):
    """
    The schema of the location report sent by the mobile app.

    Keys are camel-cased on the wire and loaded into the snake-cased
    names of the model. Every field is optional: a missing value is stored as null.
    """

    class Meta:
        unknown = EXCLUDE

    student_id = CoercedString(data_key="studentId", allow_none=True, load_default=None)
    latitude = Float(allow_none=True, load_default=None)
    longitude = Float(allow_none=True, load_default=None)
    timestamp = WholeNumber(allow_none=True, load_default=None)
