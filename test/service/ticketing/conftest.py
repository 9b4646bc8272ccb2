"""
Ticketing test configuration

Every port is backed by an in-memory fake so use cases and the HTTP layer run
end to end without PostgreSQL, the payment gateway or an SMTP relay.

The booking fake stamps created_at itself, like the database server default,
and `age()` lets a test step a booking past the hold window.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Sequence

import attrs
import pytest
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.service.ticketing.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from src.service.ticketing.app.command.confirm_payment_use_case import ConfirmPaymentUseCase
from src.service.ticketing.app.command.reserve_and_confirm_immediately_use_case import (
    ReserveAndConfirmImmediatelyUseCase,
)
from src.service.ticketing.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.ticketing.app.dto.payment_order import PaymentOrder
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.ticketing.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.app.interface.i_ticket_delivery import ITicketDelivery
from src.service.ticketing.app.query.list_held_seats_use_case import ListHeldSeatsUseCase
from src.service.ticketing.app.service.seat_conflict_checker import SeatConflictChecker
from src.service.ticketing.app.service.ticket_dispatcher import TicketDispatcher
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.seat_hold_domain import is_hold_live


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryBookingRepo(IBookingCommandRepo, IBookingQueryRepo):
    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self.clock = clock
        self.bookings: Dict[str, Booking] = {}

    # ---- test controls ----

    def age(self, booking_id: UUID, *, minutes: float) -> None:
        booking = self.bookings[str(booking_id)]
        assert booking.created_at is not None
        self.bookings[str(booking_id)] = attrs.evolve(
            booking, created_at=booking.created_at - timedelta(minutes=minutes)
        )

    def stored(self, booking_id: UUID) -> Booking:
        return self.bookings[str(booking_id)]

    # ---- command side ----

    async def create(self, *, booking: Booking) -> Booking:
        stored = attrs.evolve(booking, created_at=self.clock())
        self.bookings[str(stored.id)] = stored
        return stored

    async def get_by_id(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        booking = self.bookings.get(str(booking_id))
        if booking is None or str(booking.show_id) != str(show_id):
            return None
        return booking

    async def mark_as_paid(self, *, booking: Booking) -> Optional[Booking]:
        current = self.bookings.get(str(booking.id))
        if current is None or current.status != BookingStatus.PENDING:
            return None
        updated = attrs.evolve(current, status=BookingStatus.PAID, payment_id=booking.payment_id)
        self.bookings[str(updated.id)] = updated
        return updated

    async def mark_checked_in(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        current = await self.get_by_id(show_id=show_id, booking_id=booking_id)
        if current is None or not current.is_paid or current.checked_in:
            return None
        updated = attrs.evolve(current, checked_in=True, checked_in_at=self.clock())
        self.bookings[str(updated.id)] = updated
        return updated

    # ---- query side ----

    @staticmethod
    def _holds_seats(booking: Booking, *, since: datetime) -> bool:
        # `since` is already now - window
        return is_hold_live(
            status=booking.status,
            created_at=booking.created_at,
            now=since,
            window=timedelta(0),
        )

    def _of_show(self, show_id: UUID) -> List[Booking]:
        bookings = [b for b in self.bookings.values() if str(b.show_id) == str(show_id)]
        return sorted(bookings, key=lambda b: b.created_at or self.clock())

    async def find_paid_overlapping(
        self, *, show_id: UUID, seats: Sequence[str]
    ) -> List[Booking]:
        return [
            b
            for b in self._of_show(show_id)
            if b.status == BookingStatus.PAID and set(b.seats) & set(seats)
        ]

    async def find_live_pending_overlapping(
        self, *, show_id: UUID, seats: Sequence[str], since: datetime
    ) -> List[Booking]:
        return [
            b
            for b in self._of_show(show_id)
            if b.status == BookingStatus.PENDING
            and self._holds_seats(b, since=since)
            and set(b.seats) & set(seats)
        ]

    async def list_held_seat_groups(self, *, show_id: UUID, since: datetime) -> List[List[str]]:
        return [
            list(b.seats)
            for b in self._of_show(show_id)
            if self._holds_seats(b, since=since)
        ]


class InMemoryShowRepo(IShowCommandRepo, IShowQueryRepo):
    def __init__(self) -> None:
        self.shows: Dict[str, ShowEntity] = {}

    def add(self, show: ShowEntity) -> ShowEntity:
        self.shows[str(show.id)] = show
        return show

    async def create(self, *, show: ShowEntity) -> ShowEntity:
        return self.add(attrs.evolve(show, created_at=utc_now()))

    async def get_by_id(self, *, show_id: UUID) -> Optional[ShowEntity]:
        return self.shows.get(str(show_id))

    async def list_active(self) -> List[ShowEntity]:
        active = [show for show in self.shows.values() if show.is_active]
        return sorted(active, key=lambda show: show.starts_at)


class FakePaymentGateway(IPaymentGateway):
    def __init__(self, key_id: str = 'rzp_test_key') -> None:
        self._key_id = key_id
        self.orders: List[PaymentOrder] = []

    @property
    def key_id(self) -> str:
        return self._key_id

    async def create_order(
        self, *, amount_minor: int, currency: str, receipt: str
    ) -> PaymentOrder:
        order = PaymentOrder(
            id=f'order_test_{len(self.orders) + 1}',
            amount=amount_minor,
            currency=currency,
            receipt=receipt,
        )
        self.orders.append(order)
        return order


class RecordingTicketDelivery(ITicketDelivery):
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.delivered: List[tuple[Booking, ShowEntity]] = []

    async def deliver(self, *, booking: Booking, show: ShowEntity) -> None:
        if self.fail:
            raise ConnectionError('SMTP relay unreachable')
        self.delivered.append((booking, show))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def booking_repo() -> InMemoryBookingRepo:
    return InMemoryBookingRepo()


@pytest.fixture
def show_repo(sample_show: ShowEntity) -> InMemoryShowRepo:
    repo = InMemoryShowRepo()
    repo.add(sample_show)
    return repo


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def ticket_delivery() -> RecordingTicketDelivery:
    return RecordingTicketDelivery()


@pytest.fixture
def seat_conflict_checker(
    booking_repo: InMemoryBookingRepo, test_settings: Settings
) -> SeatConflictChecker:
    return SeatConflictChecker(booking_query_repo=booking_repo, settings=test_settings)


@pytest.fixture
def ticket_dispatcher(
    ticket_delivery: RecordingTicketDelivery, show_repo: InMemoryShowRepo
) -> TicketDispatcher:
    return TicketDispatcher(ticket_delivery=ticket_delivery, show_query_repo=show_repo)


@pytest.fixture
def reserve_use_case(
    booking_repo: InMemoryBookingRepo,
    show_repo: InMemoryShowRepo,
    seat_conflict_checker: SeatConflictChecker,
    payment_gateway: FakePaymentGateway,
    test_settings: Settings,
) -> ReserveSeatsUseCase:
    return ReserveSeatsUseCase(
        booking_command_repo=booking_repo,
        show_query_repo=show_repo,
        seat_conflict_checker=seat_conflict_checker,
        payment_gateway=payment_gateway,
        settings=test_settings,
    )


@pytest.fixture
def confirm_use_case(
    booking_repo: InMemoryBookingRepo,
    ticket_dispatcher: TicketDispatcher,
    test_settings: Settings,
) -> ConfirmPaymentUseCase:
    return ConfirmPaymentUseCase(
        booking_command_repo=booking_repo,
        ticket_dispatcher=ticket_dispatcher,
        settings=test_settings,
    )


@pytest.fixture
def instant_booking_use_case(
    booking_repo: InMemoryBookingRepo,
    show_repo: InMemoryShowRepo,
    seat_conflict_checker: SeatConflictChecker,
    ticket_dispatcher: TicketDispatcher,
    test_settings: Settings,
) -> ReserveAndConfirmImmediatelyUseCase:
    return ReserveAndConfirmImmediatelyUseCase(
        booking_command_repo=booking_repo,
        show_query_repo=show_repo,
        seat_conflict_checker=seat_conflict_checker,
        ticket_dispatcher=ticket_dispatcher,
        settings=test_settings,
    )


@pytest.fixture
def check_in_use_case(booking_repo: InMemoryBookingRepo) -> CheckInTicketUseCase:
    return CheckInTicketUseCase(booking_command_repo=booking_repo)


@pytest.fixture
def list_held_seats_use_case(
    booking_repo: InMemoryBookingRepo, seat_conflict_checker: SeatConflictChecker
) -> ListHeldSeatsUseCase:
    return ListHeldSeatsUseCase(
        booking_query_repo=booking_repo, seat_conflict_checker=seat_conflict_checker
    )
