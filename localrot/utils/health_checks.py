"""
Health Check Utilities for the rental service
Checks the record store files and the running process
"""

import time
import os
import threading
import psutil
from datetime import datetime
import logging

from localrot.store import get_store

logger = logging.getLogger(__name__)


def _timestamp():
    return datetime.utcnow().isoformat() + 'Z'


def check_store_health():
    """Check that every collection file is present and parses"""
    try:
        start_time = time.time()
        store = get_store()

        if not store.is_open:
            return {
                'status': 'unhealthy',
                'message': 'Record store is closed',
                'response_time': 0,
            }

        collections = {name: store.count(name) for name in store.collections}
        response_time = (time.time() - start_time) * 1000

        return {
            'status': 'healthy',
            'message': 'Record store is readable',
            'response_time': round(response_time, 2),
            'details': {
                'data_dir': store.data_dir,
                'collections': collections,
            },
        }
    except Exception as e:
        return {
            'status': 'unhealthy',
            'message': f'Record store health check failed: {str(e)}',
            'response_time': 0,
            'details': {
                'error': str(e),
            },
        }


def perform_readiness_check():
    """Perform readiness check"""
    check_start_time = time.time()
    checks = {}

    logger.debug('Performing record store health check')
    checks['store'] = check_store_health()
    overall_healthy = checks['store']['status'] == 'healthy'

    return {
        'status': 'ready' if overall_healthy else 'not ready',
        'timestamp': _timestamp(),
        'total_check_time': round((time.time() - check_start_time) * 1000, 2),
        'checks': checks,
    }


def perform_liveness_check():
    """Perform liveness check (should be fast and not touch the store)"""
    try:
        process = psutil.Process()

        memory_info = process.memory_info()
        memory_percent = process.memory_percent()
        memory_healthy = memory_percent < 90.0

        return {
            'status': 'alive' if memory_healthy else 'unhealthy',
            'timestamp': _timestamp(),
            'uptime': round(time.time() - process.create_time(), 2),
            'checks': {
                'memory': {
                    'healthy': memory_healthy,
                    'usage': {
                        'rss': memory_info.rss,
                        'vms': memory_info.vms,
                        'percent': round(memory_percent, 2),
                    },
                },
                'threading': {
                    'healthy': True,
                    'active_count': threading.active_count(),
                },
                'process': {
                    'pid': os.getpid(),
                },
            },
        }

    except Exception as e:
        logger.error('Liveness check failed', extra={'error': str(e)})

        return {
            'status': 'unhealthy',
            'timestamp': _timestamp(),
            'error': str(e),
        }


def get_system_metrics():
    """Get system metrics for monitoring"""
    try:
        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            'timestamp': _timestamp(),
            'uptime': round(time.time() - process.create_time(), 2),
            'memory': {
                'rss': memory_info.rss,
                'vms': memory_info.vms,
                'percent': round(process.memory_percent(), 2),
            },
            'cpu': {
                'times': process.cpu_times()._asdict(),
                'count': psutil.cpu_count(),
            },
            'process': {
                'pid': os.getpid(),
                'threads': process.num_threads(),
            },
            'environment': {
                'flask_env': os.environ.get('FLASK_ENV', 'development'),
            },
        }

    except Exception as e:
        logger.error('Metrics collection failed', extra={'error': str(e)})
        return {
            'timestamp': _timestamp(),
            'error': str(e),
        }
