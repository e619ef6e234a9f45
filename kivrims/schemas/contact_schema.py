from marshmallow import Schema, fields, ValidationError, EXCLUDE


def _not_blank(value):
    if not value.strip():
        raise ValidationError('Field may not be blank.')


class ContactMessageSchema(Schema):
    """Contact form submission / stored message schema"""
    id = fields.UUID(dump_only=True)
    name = fields.Str(required=True, validate=_not_blank)
    email = fields.Str(required=True, validate=_not_blank)
    subject = fields.Str(required=True, validate=_not_blank)
    message = fields.Str(required=True, validate=_not_blank)
    created_at = fields.DateTime(dump_only=True)

    class Meta:
        unknown = EXCLUDE
