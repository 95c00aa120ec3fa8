"""
Reservations Controller - create and list game reservations
"""

from flask import Blueprint, jsonify
from marshmallow import ValidationError
import logging

from localrot.services import ReservationService
from localrot.utils.schemas import ReservationRequestSchema, ReservationResponseSchema
from localrot.utils.request_data import get_request_data

logger = logging.getLogger(__name__)

reservations_bp = Blueprint('reservations', __name__)

reservation_request_schema = ReservationRequestSchema()
reservation_response_schema = ReservationResponseSchema()


def _validation_message(messages):
    if len(messages) == 1 and 'Invalid email' in messages.get('email', []):
        return 'Invalid email'
    return 'Invalid data'


@reservations_bp.route('/reserve', methods=['POST'])
def create_reservation():
    """Create a reservation, priced and with its initial status"""
    try:
        data = reservation_request_schema.load(get_request_data())
    except ValidationError as e:
        return jsonify({
            'error': 'Bad Request',
            'message': _validation_message(e.messages),
            'details': e.messages,
            'status_code': 400
        }), 400

    reservation = ReservationService().create_reservation(**data)
    return jsonify({
        'success': True,
        'reservation': reservation_response_schema.dump(reservation)
    }), 200


@reservations_bp.route('/reservations/<username>', methods=['GET'])
def list_reservations(username):
    """All reservations of one user"""
    reservations = ReservationService().list_reservations_for_user(username)
    return jsonify(reservation_response_schema.dump(reservations, many=True)), 200
