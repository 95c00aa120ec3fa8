"""
Payment Service - payment records and provider completion events
"""

from typing import Any, Dict, List, Optional
import logging

from localrot.exceptions import NotFoundError
from localrot.models import Payment, PaymentStatus
from localrot.repositories import PaymentRepository
from localrot.store import PAYMENTS, RESERVATIONS
from .reservation_service import ReservationService

logger = logging.getLogger(__name__)

# PayPal webhook event types that mean the money arrived
COMPLETION_EVENTS = frozenset({
    'PAYMENT.CAPTURE.COMPLETED',
    'CHECKOUT.ORDER.COMPLETED',
})


def extract_external_ids(resource: Dict[str, Any]) -> List[str]:
    """Identifiers a PayPal resource can carry, most specific first"""
    candidates = []

    supplementary = resource.get('supplementary_data')
    if isinstance(supplementary, dict):
        related = supplementary.get('related_ids')
        if isinstance(related, dict):
            candidates.append(related.get('order_id'))
    candidates.append(resource.get('id'))
    candidates.append(resource.get('custom_id'))

    seen = []
    for candidate in candidates:
        if candidate and isinstance(candidate, str) and candidate not in seen:
            seen.append(candidate)
    return seen


class PaymentService:
    """Business logic for payments"""

    def __init__(self, payment_repo=None, reservation_service=None):
        self.payment_repo = payment_repo or PaymentRepository()
        self.reservation_service = reservation_service or ReservationService()

    def create_payment(self, reservation_id: str, external_id: Optional[str] = None) -> Dict[str, Any]:
        """Record a payment intent for an existing reservation"""
        reservation = self.reservation_service.get_reservation(reservation_id)
        if not reservation:
            raise NotFoundError("Reservation not found")

        payment = Payment(reservation_id=reservation_id, external_id=external_id)
        created = self.payment_repo.create(payment)

        logger.info(
            f"Created payment {created.id} for reservation {reservation_id} "
            f"(external id {created.external_id})"
        )
        return created.to_dict()

    def complete_payment(self, external_id: str) -> Optional[Dict[str, Any]]:
        """
        Mark the payment with this provider id COMPLETED and confirm its
        reservation. Leaves everything untouched when nothing matches.
        """
        store = self.payment_repo.store
        # Lock order: payments, then reservations
        with store.locked(PAYMENTS, RESERVATIONS):
            payment = self.payment_repo.get_by_external_id(external_id)
            if not payment:
                logger.warning(f"No payment matches external id {external_id}")
                return None

            updated = self.payment_repo.update_status(payment.id, PaymentStatus.COMPLETED)
            self.reservation_service.confirm_reservation(payment.reservation_id)

        logger.info(f"Payment {payment.id} completed for reservation {payment.reservation_id}")
        return updated.to_dict()

    def handle_webhook_event(self, event: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply a provider webhook event; returns the completed payment if any"""
        event_type = event.get('event_type')
        if event_type not in COMPLETION_EVENTS:
            logger.info(f"Ignoring webhook event {event_type}")
            return None

        resource = event.get('resource') or {}
        if not isinstance(resource, dict):
            logger.warning(f"Webhook event {event_type} has no usable resource")
            return None

        for external_id in extract_external_ids(resource):
            completed = self.complete_payment(external_id)
            if completed:
                return completed

        logger.warning(f"Webhook event {event_type} matched no payment")
        return None
