"""
Reservation Service - Business logic for the reservation lifecycle
"""

from typing import Any, Dict, List, Optional
import logging

from localrot.models import Reservation, ReservationStatus
from localrot.repositories import ReservationRepository
from .pricing import calculate_price

logger = logging.getLogger(__name__)


def initial_status(price: float) -> ReservationStatus:
    """Free reservations are confirmed straight away"""
    if price <= 0:
        return ReservationStatus.CONFIRMED
    return ReservationStatus.PENDING_PAYMENT


class ReservationService:
    """Business logic for reservation management"""

    def __init__(self, reservation_repo=None):
        self.reservation_repo = reservation_repo or ReservationRepository()

    def create_reservation(self, username: str, game: str, type: str, amount: float,
                           email: str, date: Optional[str] = None) -> Dict[str, Any]:
        """Price a rental request and store it as a new reservation"""
        price = calculate_price(type, amount)
        reservation = Reservation(
            username=username,
            game=game,
            type=type,
            amount=amount,
            date=date or None,
            email=email,
            price=price,
            status=initial_status(price)
        )

        created = self.reservation_repo.create(reservation)
        logger.info(
            f"Created reservation {created.id} for {username}: "
            f"{amount} {type} of {game}, price {price}, status {created.status.value}"
        )
        return created.to_dict()

    def list_reservations_for_user(self, username: str) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.reservation_repo.get_by_username(username)]

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self.reservation_repo.get_by_id(reservation_id)

    def confirm_reservation(self, reservation_id: str) -> Optional[Reservation]:
        """
        Move a reservation to CONFIRMED after its payment completed.

        CONFIRMED is terminal, so confirming twice is a no-op. Returns None
        when the reservation does not exist.
        """
        reservation = self.reservation_repo.get_by_id(reservation_id)
        if not reservation:
            logger.warning(f"Cannot confirm unknown reservation {reservation_id}")
            return None

        if reservation.is_confirmed:
            return reservation

        updated = self.reservation_repo.update_status(reservation_id, ReservationStatus.CONFIRMED)
        logger.info(f"Confirmed reservation {reservation_id}")
        return updated
