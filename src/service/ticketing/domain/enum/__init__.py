"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.enum.check_in_outcome import CheckInOutcome

__all__ = ['BookingStatus', 'CheckInOutcome']
