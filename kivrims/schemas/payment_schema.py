from marshmallow import Schema, fields, validate, pre_load, post_load, ValidationError, EXCLUDE


def _whole_number(value):
    if value != value.to_integral_value():
        raise ValidationError('Amount must be a whole number')


class StkPushSchema(Schema):
    """STK push request schema"""
    # Decimal keeps the fraction so 99.99 is rejected instead of truncated
    amount = fields.Decimal(
        required=True,
        validate=[
            validate.Range(min=1, error='Amount must be greater than 0'),
            _whole_number,
        ]
    )
    phone = fields.Str(
        required=True,
        validate=validate.Length(min=1, error='Phone number is required')
    )

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def strip_phone(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get('phone'), str):
            data = {**data, 'phone': data['phone'].strip()}
        return data

    @post_load
    def amount_to_int(self, data, **kwargs):
        data['amount'] = int(data['amount'])
        return data
