"""
Models package - Domain records for the rental service
"""

# Import enums first
from .enums import RentalType, ReservationStatus, PaymentStatus

# Import models
from .user import User
from .reservation import Reservation
from .payment import Payment

# Export all models and enums
__all__ = [
    'RentalType',
    'ReservationStatus',
    'PaymentStatus',
    'User',
    'Reservation',
    'Payment'
]
