"""
Base Repository Interface - Abstract base classes
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from localrot.models import User, Reservation, Payment, ReservationStatus, PaymentStatus


class UserRepositoryInterface(ABC):
    """Abstract base class for user repository"""

    @abstractmethod
    def create(self, user: User) -> User:
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class ReservationRepositoryInterface(ABC):
    """Abstract base class for reservation repository"""

    @abstractmethod
    def create(self, reservation: Reservation) -> Reservation:
        pass

    @abstractmethod
    def get_by_id(self, reservation_id: str) -> Optional[Reservation]:
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> List[Reservation]:
        pass

    @abstractmethod
    def update_status(self, reservation_id: str, status: ReservationStatus) -> Optional[Reservation]:
        pass

    @abstractmethod
    def get_all(self) -> List[Reservation]:
        pass


class PaymentRepositoryInterface(ABC):
    """Abstract base class for payment repository"""

    @abstractmethod
    def create(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    def get_by_external_id(self, external_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    def get_by_reservation_id(self, reservation_id: str) -> List[Payment]:
        pass

    @abstractmethod
    def update_status(self, payment_id: str, status: PaymentStatus) -> Optional[Payment]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
