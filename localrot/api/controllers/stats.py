"""
Stats Controller - counts for the admin dashboard
"""

from flask import Blueprint, jsonify
import logging

from localrot.services import StatsService
from localrot.utils.schemas import StatsResponseSchema

logger = logging.getLogger(__name__)

stats_bp = Blueprint('stats', __name__)

stats_response_schema = StatsResponseSchema()


@stats_bp.route('/admin/stats', methods=['GET'])
def get_admin_stats():
    """
    Get counts for the admin dashboard

    Returns:
        JSON with:
        - users: registered accounts
        - reservations: all reservations
        - confirmed: reservations in CONFIRMED
        - pending: reservations in PENDING_PAYMENT
        - payments: payment records
    """
    stats = StatsService().collect_stats()
    logger.info(f"Stats retrieved: {stats}")
    return jsonify(stats_response_schema.dump(stats)), 200
