"""
Booking Command Repository Interface

Writes of the booking lifecycle: insert a hold, pending -> paid, check-in.
Bookings are never deleted and their seats never change.
"""

from abc import ABC, abstractmethod
from typing import Optional

from uuid_utils import UUID

from src.service.ticketing.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a booking; storage assigns created_at.

        Returns:
            The stored booking including its created_at
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        """Point read scoped to the show, None when either id does not match"""
        pass

    @abstractmethod
    async def mark_as_paid(self, *, booking: Booking) -> Optional[Booking]:
        """
        Persist the paid status and payment reference of `booking`.

        Only a still-pending row is updated.

        Returns:
            Updated booking, or None when the row was already paid
        """
        pass

    @abstractmethod
    async def mark_checked_in(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        """
        Set checked_in and a storage timestamp unless already checked in.

        Returns:
            Updated booking, or None when another scan got there first
        """
        pass
