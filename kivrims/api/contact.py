from flask import Blueprint, request, jsonify
import marshmallow
from sqlalchemy.exc import SQLAlchemyError

from kivrims.errors import ValidationError
from kivrims.schemas import ContactMessageSchema
from kivrims.services.contact_service import ContactService
from kivrims.utils.logger import get_logger

contact_bp = Blueprint('contact', __name__)
logger = get_logger(__name__)

contact_schema = ContactMessageSchema()


@contact_bp.route('/contact', methods=['POST'])
def create_contact_message():
    """
    Store a contact form submission

    Body:
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "subject": "Enquiry",
            "message": "Hello"
        }
    """
    try:
        data = contact_schema.load(request.get_json(silent=True) or {})
    except marshmallow.ValidationError as e:
        raise ValidationError('All fields are required.', errors=e.messages) from e

    try:
        contact_message = ContactService.create_message(data)
    except SQLAlchemyError as e:
        logger.error(f'Contact message error: {str(e)}')
        return jsonify({
            'message': 'Server error.',
            'error': str(e)
        }), 500

    return jsonify({
        'message': 'Contact message sent successfully!',
        'data': contact_schema.dump(contact_message)
    }), 201
