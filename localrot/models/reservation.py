"""
Reservation Model
"""

from typing import Any, Dict, Optional

from localrot.utils.identifiers import generate_id, now_ms, RESERVATION_PREFIX
from .enums import ReservationStatus


class Reservation:
    """Game rental reservation"""
    collection = 'reservations'

    def __init__(self, username: str, game: str, type: str, amount: float, email: str,
                 price: float, status: ReservationStatus = ReservationStatus.PENDING_PAYMENT,
                 date: Optional[str] = None, id: Optional[str] = None,
                 created_at: Optional[int] = None):
        self.id = id or generate_id(RESERVATION_PREFIX)
        self.username = username
        self.game = game
        self.type = type
        self.amount = amount
        self.date = date
        self.email = email
        self.price = price
        self.status = status
        self.created_at = created_at if created_at is not None else now_ms()

    def __repr__(self):
        return f'<Reservation {self.id}>'

    @property
    def is_confirmed(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED

    @property
    def is_pending_payment(self) -> bool:
        return self.status == ReservationStatus.PENDING_PAYMENT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Reservation':
        return cls(
            id=data['id'],
            username=data['username'],
            game=data['game'],
            type=data['type'],
            amount=data['amount'],
            date=data.get('date'),
            email=data['email'],
            price=data['price'],
            status=ReservationStatus(data['status']),
            created_at=data.get('createdAt'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'username': self.username,
            'game': self.game,
            'type': self.type,
            'amount': self.amount,
            'date': self.date,
            'email': self.email,
            'price': self.price,
            'status': self.status.value,
            'createdAt': self.created_at,
        }
