from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Sequence

from uuid_utils import UUID

from src.service.ticketing.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Read side of the seat conflict check"""

    @abstractmethod
    async def find_paid_overlapping(
        self, *, show_id: UUID, seats: Sequence[str]
    ) -> List[Booking]:
        """Paid bookings of the show sharing at least one seat with `seats`"""
        pass

    @abstractmethod
    async def find_live_pending_overlapping(
        self, *, show_id: UUID, seats: Sequence[str], since: datetime
    ) -> List[Booking]:
        """Pending bookings created after `since` sharing at least one seat with `seats`"""
        pass

    @abstractmethod
    async def list_held_seat_groups(self, *, show_id: UUID, since: datetime) -> List[List[str]]:
        """Seat lists of every paid booking plus every pending booking created after `since`"""
        pass
