"""
Schemas Package
Marshmallow schemas for request/response validation
"""

from kivrims.schemas.payment_schema import StkPushSchema
from kivrims.schemas.contact_schema import ContactMessageSchema

__all__ = [
    'StkPushSchema',
    'ContactMessageSchema'
]
