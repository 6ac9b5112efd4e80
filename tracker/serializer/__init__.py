"""
.. autoclasstree:: tracker.serializer

The serializer package houses all the schemas for the input/output in the system.
The serializers are used to coerce and dump any raw data (such as JSON)
going in and out of the system.
"""

from .fields import CoercedString, WholeNumber
from .decorators import expects, returns, error_response
