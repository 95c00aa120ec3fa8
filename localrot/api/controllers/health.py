"""
Health check endpoints for the rental service
"""

from flask import Blueprint, jsonify, current_app
from datetime import datetime
import logging

from localrot.utils.health_checks import (
    perform_readiness_check,
    perform_liveness_check,
    get_system_metrics
)

logger = logging.getLogger(__name__)

SERVICE_NAME = 'localrot'

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """Main health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': SERVICE_NAME,
        'timestamp': datetime.utcnow().isoformat() + 'Z',
        'environment': current_app.config.get('ENV_NAME', 'development'),
    }), 200


@health_bp.route('/health/ready', methods=['GET'])
def readiness():
    """Readiness probe - checks that the record store is usable"""
    readiness_result = perform_readiness_check()

    logger.info('Readiness check performed', extra={
        'status': readiness_result['status'],
        'total_check_time': readiness_result['total_check_time'],
    })

    status_code = 200 if readiness_result['status'] == 'ready' else 503
    return jsonify({'service': SERVICE_NAME, **readiness_result}), status_code


@health_bp.route('/health/live', methods=['GET'])
def liveness():
    """Liveness probe - checks if service is alive and responsive"""
    liveness_result = perform_liveness_check()

    if liveness_result['status'] != 'alive':
        logger.warning('Liveness check failed', extra={'status': liveness_result['status']})

    status_code = 200 if liveness_result['status'] == 'alive' else 503
    return jsonify({'service': SERVICE_NAME, **liveness_result}), status_code


@health_bp.route('/metrics', methods=['GET'])
def metrics():
    """System metrics endpoint for monitoring"""
    system_metrics = get_system_metrics()
    status_code = 500 if 'error' in system_metrics else 200
    return jsonify({'service': SERVICE_NAME, **system_metrics}), status_code
