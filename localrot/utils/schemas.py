from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE
from localrot.models import RentalType

# Same rule the web frontend applies
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'


class BaseRequestSchema(Schema):
    """Ignores unknown keys so older clients keep working"""

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def drop_empty_values(self, data, **kwargs):
        # Blank strings count as missing fields
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items() if value not in ('', None)}


class CredentialsRequestSchema(BaseRequestSchema):
    """Schema for register and login requests"""
    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


class ReservationRequestSchema(BaseRequestSchema):
    """Schema for creating reservations"""
    username = fields.Str(required=True, validate=validate.Length(min=1))
    game = fields.Str(required=True, validate=validate.Length(min=1))
    type = fields.Str(
        required=True,
        validate=validate.OneOf([rt.value for rt in RentalType])
    )
    amount = fields.Float(
        required=True,
        validate=validate.Range(min=0, min_inclusive=False)
    )
    date = fields.Str(load_default=None)
    email = fields.Str(
        required=True,
        validate=validate.Regexp(EMAIL_PATTERN, error='Invalid email')
    )

    @post_load
    def keep_whole_amounts(self, data, **kwargs):
        # 3 stays 3, not 3.0
        amount = data.get('amount')
        if isinstance(amount, float) and amount.is_integer():
            data['amount'] = int(amount)
        return data


class PaymentCreateRequestSchema(BaseRequestSchema):
    """Schema for creating payment records"""
    reservationId = fields.Str(required=True, validate=validate.Length(min=1))
    externalId = fields.Str(load_default=None)


class ReservationResponseSchema(Schema):
    """Schema for reservation responses"""
    id = fields.Str()
    username = fields.Str()
    game = fields.Str()
    type = fields.Str()
    amount = fields.Raw()
    date = fields.Str(allow_none=True)
    email = fields.Str()
    price = fields.Float()
    status = fields.Str()
    createdAt = fields.Int()


class PaymentResponseSchema(Schema):
    """Schema for payment responses"""
    id = fields.Str()
    reservationId = fields.Str()
    externalId = fields.Str()
    status = fields.Str()
    createdAt = fields.Int()


class StatsResponseSchema(Schema):
    """Schema for admin stats"""
    users = fields.Int()
    reservations = fields.Int()
    confirmed = fields.Int()
    pending = fields.Int()
    payments = fields.Int()
