"""
Fields
-------

Defines some additional fields so that the Schemas can
accept the loosely typed data that mobile clients send.
"""

from marshmallow import fields, ValidationError


class CoercedString(fields.String):
    """
    A string field that also accepts numbers, storing their text form.

    Client apps are free to send their identifiers as either
    ``"1234"`` or ``1234``, so both are treated the same.
    """

    def _deserialize(self, value, attr, data, **kwargs) -> str:
        if isinstance(value, bool):
            raise ValidationError(f"Expected a string or a number, not {type(value).__name__}.")
        if isinstance(value, (int, float)):
            return str(value)
        return super()._deserialize(value, attr, data, **kwargs)


class WholeNumber(fields.Integer):
    """
    An integer field that accepts integral floats and integer strings,
    but refuses to drop the fractional part of a number.

    A bigint column will not store ``1000.7``, so neither does this field.
    """

    def _deserialize(self, value, attr, data, **kwargs) -> int:
        if isinstance(value, bool):
            raise ValidationError(f"Expected a whole number, not {type(value).__name__}.")
        if isinstance(value, float) and not value.is_integer():
            raise ValidationError(f"Expected a whole number, not {value}.")
        return super()._deserialize(value, attr, data, **kwargs)
