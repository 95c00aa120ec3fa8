"""
Model Enums
"""

from enum import Enum


class RentalType(Enum):
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


class ReservationStatus(Enum):
    PENDING_PAYMENT = "PENDING_PAYMENT"
    CONFIRMED = "CONFIRMED"


class PaymentStatus(Enum):
    CREATED = "CREATED"
    COMPLETED = "COMPLETED"
