"""
Payment Model
"""

from typing import Any, Dict, Optional

from localrot.utils.identifiers import generate_id, now_ms, PAYMENT_PREFIX
from .enums import PaymentStatus


class Payment:
    """Payment intent linked to a reservation"""
    collection = 'payments'

    def __init__(self, reservation_id: str, external_id: Optional[str] = None,
                 status: PaymentStatus = PaymentStatus.CREATED, id: Optional[str] = None,
                 created_at: Optional[int] = None):
        self.id = id or generate_id(PAYMENT_PREFIX)
        self.reservation_id = reservation_id
        # Identifier the payment provider echoes back in its webhook.
        # Falls back to our own id so the linkage is never empty.
        self.external_id = external_id or self.id
        self.status = status
        self.created_at = created_at if created_at is not None else now_ms()

    def __repr__(self):
        return f'<Payment {self.id} reservation={self.reservation_id}>'

    @property
    def is_completed(self) -> bool:
        return self.status == PaymentStatus.COMPLETED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Payment':
        return cls(
            id=data['id'],
            reservation_id=data['reservationId'],
            external_id=data.get('externalId'),
            status=PaymentStatus(data['status']),
            created_at=data.get('createdAt'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'reservationId': self.reservation_id,
            'externalId': self.external_id,
            'status': self.status.value,
            'createdAt': self.created_at,
        }
