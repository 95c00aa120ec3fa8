"""
Auth Controller - registration and login
"""

from flask import Blueprint, jsonify
from marshmallow import ValidationError
import logging

from localrot.exceptions import InvalidCredentialsError
from localrot.services import UserService
from localrot.utils.schemas import CredentialsRequestSchema
from localrot.utils.request_data import get_request_data

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

credentials_schema = CredentialsRequestSchema()


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create a user account"""
    try:
        data = credentials_schema.load(get_request_data())
    except ValidationError as e:
        return jsonify({
            'error': 'Bad Request',
            'message': 'Missing fields',
            'details': e.messages,
            'status_code': 400
        }), 400

    UserService().register(data['username'], data['password'])
    return jsonify({'success': True}), 200


@auth_bp.route('/login', methods=['POST'])
def login():
    """Check credentials and return the public user record"""
    try:
        data = credentials_schema.load(get_request_data())
    except ValidationError:
        # Any unusable credential payload is just a failed login
        raise InvalidCredentialsError()

    user = UserService().authenticate(data['username'], data['password'])
    return jsonify({'success': True, 'user': user}), 200
