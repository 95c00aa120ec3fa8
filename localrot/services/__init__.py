"""
Services package - Business logic layer
"""

from .pricing import calculate_price
from .user_service import UserService
from .reservation_service import ReservationService
from .payment_service import PaymentService
from .stats_service import StatsService

__all__ = [
    'calculate_price',
    'UserService',
    'ReservationService',
    'PaymentService',
    'StatsService'
]
