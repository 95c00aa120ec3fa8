"""
Payment Repository Implementation
"""

from typing import List, Optional

from localrot.models import Payment, PaymentStatus
from localrot.store import get_store, PAYMENTS
from .base import PaymentRepositoryInterface


class PaymentRepository(PaymentRepositoryInterface):
    """Payments stored in payments.json"""

    def __init__(self, store=None):
        self.store = store or get_store()

    def create(self, payment: Payment) -> Payment:
        """Create new payment record"""
        with self.store.update(PAYMENTS) as payments:
            payments.append(payment.to_dict())
        return payment

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        for data in self.store.read(PAYMENTS):
            if data['id'] == payment_id:
                return Payment.from_dict(data)
        return None

    def get_by_external_id(self, external_id: str) -> Optional[Payment]:
        """Get the first payment whose provider id matches"""
        for data in self.store.read(PAYMENTS):
            if data.get('externalId', data['id']) == external_id:
                return Payment.from_dict(data)
        return None

    def get_by_reservation_id(self, reservation_id: str) -> List[Payment]:
        return [
            Payment.from_dict(data)
            for data in self.store.read(PAYMENTS)
            if data['reservationId'] == reservation_id
        ]

    def update_status(self, payment_id: str, status: PaymentStatus) -> Optional[Payment]:
        """Update payment status"""
        with self.store.update(PAYMENTS) as payments:
            for data in payments:
                if data['id'] == payment_id:
                    data['status'] = status.value
                    return Payment.from_dict(data)
        return None

    def count(self) -> int:
        return self.store.count(PAYMENTS)
