"""
Seat Conflict Checker

The two-stage availability check run right before a booking is written:
paid bookings first, then pending holds still inside the hold window.

The check and the following insert are separate statements. Two buyers racing
for one seat can both pass; only one of them can complete payment for the
order created afterwards.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import SeatConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.seat_hold_domain import first_conflicting_seat, hold_cutoff


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SeatConflictChecker:
    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        settings: Settings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.hold_window = timedelta(minutes=settings.SEAT_HOLD_MINUTES)
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    def live_since(self) -> datetime:
        """Pending bookings created after this instant still hold their seats"""
        return hold_cutoff(now=self.clock(), window=self.hold_window)

    @Logger.io
    async def ensure_seats_free(self, *, show_id: UUID, seats: Sequence[str]) -> None:
        """
        Raises:
            SeatConflictError: reason "already booked" when a paid booking owns a seat,
                "hold in progress" when a live pending booking does
        """
        with self.tracer.start_as_current_span(
            'seat_conflict_checker.ensure_seats_free',
            attributes={'show.id': str(show_id), 'seat.count': len(seats)},
        ):
            paid = await self.booking_query_repo.find_paid_overlapping(
                show_id=show_id, seats=seats
            )
            if paid:
                seat = first_conflicting_seat(
                    requested=seats, booked_seat_groups=[booking.seats for booking in paid]
                )
                raise SeatConflictError(seat or seats[0], SeatConflictError.ALREADY_BOOKED)

            pending = await self.booking_query_repo.find_live_pending_overlapping(
                show_id=show_id, seats=seats, since=self.live_since()
            )
            if pending:
                seat = first_conflicting_seat(
                    requested=seats, booked_seat_groups=[booking.seats for booking in pending]
                )
                raise SeatConflictError(seat or seats[0], SeatConflictError.HOLD_IN_PROGRESS)
