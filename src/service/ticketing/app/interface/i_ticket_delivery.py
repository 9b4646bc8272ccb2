from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.show_entity import ShowEntity


class ITicketDelivery(ABC):
    @abstractmethod
    async def deliver(self, *, booking: Booking, show: ShowEntity) -> None:
        """Send the QR ticket of a paid booking to the purchaser; raises on failure"""
        pass
