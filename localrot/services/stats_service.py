"""
Stats Service - counts for the admin dashboard
"""

from typing import Dict

from localrot.models import ReservationStatus
from localrot.repositories import UserRepository, ReservationRepository, PaymentRepository


class StatsService:
    """Read-only aggregation over the three collections"""

    def __init__(self, user_repo=None, reservation_repo=None, payment_repo=None):
        self.user_repo = user_repo or UserRepository()
        self.reservation_repo = reservation_repo or ReservationRepository()
        self.payment_repo = payment_repo or PaymentRepository()

    def collect_stats(self) -> Dict[str, int]:
        reservations = self.reservation_repo.get_all()
        return {
            'users': self.user_repo.count(),
            'reservations': len(reservations),
            'confirmed': sum(1 for r in reservations if r.status == ReservationStatus.CONFIRMED),
            'pending': sum(1 for r in reservations if r.status == ReservationStatus.PENDING_PAYMENT),
            'payments': self.payment_repo.count(),
        }
