"""
Seat Hold Domain

Pure rules deciding which seats are held. A seat is held while it sits in a
paid booking, or in a pending booking younger than the hold window. Expiry is
never stored; it is recomputed from created_at on every read.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.value_object.seat_grid import seat_sort_key


def hold_cutoff(*, now: datetime, window: timedelta) -> datetime:
    """Pending bookings created after this instant still hold their seats"""
    return now - window


def is_hold_live(
    *,
    status: BookingStatus,
    created_at: Optional[datetime],
    now: datetime,
    window: timedelta,
) -> bool:
    if status == BookingStatus.PAID:
        return True
    if created_at is None:
        return False
    return created_at > hold_cutoff(now=now, window=window)


def first_conflicting_seat(
    *, requested: Sequence[str], booked_seat_groups: Iterable[Sequence[str]]
) -> Optional[str]:
    """First requested seat found in the first overlapping booking"""
    for booked in booked_seat_groups:
        booked_set = set(booked)
        for seat in requested:
            if seat in booked_set:
                return seat
    return None


def merge_held_seats(seat_groups: Iterable[Sequence[str]]) -> List[str]:
    """De-duplicated union of several bookings' seats, in seat-map order"""
    return sorted({seat for group in seat_groups for seat in group}, key=seat_sort_key)
