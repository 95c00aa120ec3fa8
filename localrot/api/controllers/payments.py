"""
Payments Controller - payment records and the PayPal webhook
"""

from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
import logging

from localrot.services import PaymentService
from localrot.utils.schemas import PaymentCreateRequestSchema, PaymentResponseSchema
from localrot.utils.request_data import get_request_data

logger = logging.getLogger(__name__)

payments_bp = Blueprint('payments', __name__)

payment_create_schema = PaymentCreateRequestSchema()
payment_response_schema = PaymentResponseSchema()


@payments_bp.route('/payment/create', methods=['POST'])
def create_payment():
    """Record a payment intent for a reservation"""
    try:
        data = payment_create_schema.load(get_request_data())
    except ValidationError as e:
        return jsonify({
            'error': 'Bad Request',
            'message': 'Missing reservationId',
            'details': e.messages,
            'status_code': 400
        }), 400

    payment = PaymentService().create_payment(data['reservationId'], data['externalId'])
    return jsonify({
        'success': True,
        'payment': payment_response_schema.dump(payment)
    }), 200


@payments_bp.route('/paypal/webhook', methods=['POST'])
def paypal_webhook():
    """
    Handle a PayPal webhook event.

    Always answers 200 so PayPal does not keep redelivering events we
    cannot match.
    """
    event = request.get_json(silent=True)
    if not isinstance(event, dict):
        current_app.logger.warning("Received PayPal webhook without a JSON object body")
        return jsonify({'success': True, 'processed': False}), 200

    current_app.logger.info(
        f"Received PayPal webhook {event.get('event_type')} (id {event.get('id', 'N/A')})"
    )

    try:
        payment = PaymentService().handle_webhook_event(event)
    except Exception as e:
        current_app.logger.error(f"Error processing PayPal webhook: {str(e)}", exc_info=True)
        return jsonify({'success': False, 'processed': False, 'error': str(e)}), 200

    return jsonify({'success': True, 'processed': payment is not None}), 200
