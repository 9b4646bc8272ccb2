from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
import uuid_utils
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, SeatConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.ticketing.app.dto.confirmation_result import ConfirmationResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.app.service.booking_request import validate_booking_request
from src.service.ticketing.app.service.seat_conflict_checker import SeatConflictChecker
from src.service.ticketing.app.service.ticket_dispatcher import TicketDispatcher
from src.service.ticketing.domain.entity.booking_entity import Booking


class ReserveAndConfirmImmediatelyUseCase:
    """
    Test booking: paid straight away, no gateway involved.

    Runs the same conflict check as a normal hold, so it cannot double-book
    either. Refused unless ENABLE_TEST_BOOKING is on.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        show_query_repo: IShowQueryRepo,
        seat_conflict_checker: SeatConflictChecker,
        ticket_dispatcher: TicketDispatcher,
        settings: Settings,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.show_query_repo = show_query_repo
        self.seat_conflict_checker = seat_conflict_checker
        self.ticket_dispatcher = ticket_dispatcher
        self.settings = settings
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        show_query_repo: IShowQueryRepo = Depends(Provide[Container.show_query_repo]),
        seat_conflict_checker: SeatConflictChecker = Depends(
            Provide[Container.seat_conflict_checker]
        ),
        ticket_dispatcher: TicketDispatcher = Depends(Provide[Container.ticket_dispatcher]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            show_query_repo=show_query_repo,
            seat_conflict_checker=seat_conflict_checker,
            ticket_dispatcher=ticket_dispatcher,
            settings=settings,
        )

    @Logger.io
    async def reserve_and_confirm(
        self,
        *,
        show_id: UUID,
        seats: List[str],
        name: str,
        email: str,
        phone: str,
    ) -> ConfirmationResult:
        if not self.settings.ENABLE_TEST_BOOKING:
            raise ForbiddenError('Test bookings are disabled')

        with self.tracer.start_as_current_span(
            'use_case.reserve_and_confirm_immediately', attributes={'show.id': str(show_id)}
        ) as span:
            _, requested, purchaser = await validate_booking_request(
                show_query_repo=self.show_query_repo,
                settings=self.settings,
                show_id=show_id,
                seats=seats,
                name=name,
                email=email,
                phone=phone,
            )

            try:
                await self.seat_conflict_checker.ensure_seats_free(
                    show_id=show_id, seats=requested
                )
            except SeatConflictError as e:
                metrics.record_seat_hold(path='test', result=e.reason.replace(' ', '_'))
                raise

            booking = Booking.create_paid_without_gateway(
                id=uuid_utils.uuid7(),
                show_id=show_id,
                seats=requested,
                purchaser=purchaser,
                amount=len(requested) * self.settings.TICKET_PRICE,
            )
            created = await self.booking_command_repo.create(booking=booking)
            span.set_attribute('booking.id', str(created.id))

            Logger.base.info(f'🧪 [TEST BOOKING] Booking {created.id} paid for {requested}')
            metrics.record_seat_hold(path='test', result='created', seat_count=len(requested))

            delivered = await self.ticket_dispatcher.dispatch(booking=created)

            return ConfirmationResult(
                booking_id=created.id,
                status=created.status,
                amount=created.amount,
                seats=created.seats,
                ticket_delivered=delivered,
            )
