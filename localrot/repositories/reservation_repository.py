"""
Reservation Repository Implementation
"""

from typing import List, Optional

from localrot.models import Reservation, ReservationStatus
from localrot.store import get_store, RESERVATIONS
from .base import ReservationRepositoryInterface


class ReservationRepository(ReservationRepositoryInterface):
    """Reservations stored in reservations.json"""

    def __init__(self, store=None):
        self.store = store or get_store()

    def create(self, reservation: Reservation) -> Reservation:
        """Create new reservation"""
        with self.store.update(RESERVATIONS) as reservations:
            reservations.append(reservation.to_dict())
        return reservation

    def get_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """Get reservation by ID"""
        for data in self.store.read(RESERVATIONS):
            if data['id'] == reservation_id:
                return Reservation.from_dict(data)
        return None

    def get_by_username(self, username: str) -> List[Reservation]:
        """Get reservations made by a user, in creation order"""
        return [
            Reservation.from_dict(data)
            for data in self.store.read(RESERVATIONS)
            if data['username'] == username
        ]

    def update_status(self, reservation_id: str, status: ReservationStatus) -> Optional[Reservation]:
        """Update reservation status"""
        with self.store.update(RESERVATIONS) as reservations:
            for data in reservations:
                if data['id'] == reservation_id:
                    data['status'] = status.value
                    return Reservation.from_dict(data)
        return None

    def get_all(self) -> List[Reservation]:
        return [Reservation.from_dict(data) for data in self.store.read(RESERVATIONS)]

    def count(self) -> int:
        return self.store.count(RESERVATIONS)
