"""
Repositories package - Data access layer over the record store
"""

# Import interfaces
from .base import UserRepositoryInterface, ReservationRepositoryInterface, PaymentRepositoryInterface

# Import concrete implementations
from .user_repository import UserRepository
from .reservation_repository import ReservationRepository
from .payment_repository import PaymentRepository

# Export all interfaces and implementations
__all__ = [
    'UserRepositoryInterface',
    'ReservationRepositoryInterface',
    'PaymentRepositoryInterface',
    'UserRepository',
    'ReservationRepository',
    'PaymentRepository'
]
