"""
M-Pesa API Endpoints
STK push initiation and the Daraja callback
"""

from flask import Blueprint, request, jsonify
import marshmallow

from kivrims.errors import AccessTokenError, GatewayError, ValidationError
from kivrims.providers import get_mpesa_client
from kivrims.schemas import StkPushSchema
from kivrims.services.payment_service import PaymentService
from kivrims.utils.logger import get_logger

payments_bp = Blueprint('payments', __name__)
logger = get_logger(__name__)

stk_push_schema = StkPushSchema()


@payments_bp.route('/stk-push', methods=['POST'])
def stk_push():
    """
    Initiate an M-Pesa STK push

    Body:
        {
            "amount": 100,
            "phone": "0712345678"
        }
    """
    try:
        data = stk_push_schema.load(request.get_json(silent=True) or {})
    except marshmallow.ValidationError as e:
        raise ValidationError('Amount and phone number are required.', errors=e.messages) from e

    try:
        result = PaymentService.initiate_stk_push(
            client=get_mpesa_client(),
            amount=data['amount'],
            phone=data['phone']
        )

    except GatewayError as e:
        return jsonify(e.to_dict()), e.status_code

    except AccessTokenError as e:
        return jsonify({
            'message': 'Server error during M-Pesa STK Push.',
            'error': e.error
        }), e.status_code

    except Exception as e:
        logger.exception(f'STK Push error: {str(e)}')
        return jsonify({
            'message': 'Server error during M-Pesa STK Push.',
            'error': str(e)
        }), 500

    return jsonify({
        'message': 'STK Push initiated successfully!',
        'data': result
    }), 200


@payments_bp.route('/mpesa-callback', methods=['POST'])
def mpesa_callback():
    """
    Receive the asynchronous STK push result from Safaricom

    The payload is logged and acknowledged; it is not validated or stored.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.get_data(as_text=True)

    logger.info(f'M-Pesa Callback received: {payload}')

    return jsonify({'message': 'Callback received'}), 200
