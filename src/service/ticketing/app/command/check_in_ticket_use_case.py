from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, NotPaidError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.ticketing.app.dto.check_in_result import CheckInResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.enum.check_in_outcome import CheckInOutcome
from src.service.ticketing.domain.value_object.ticket_payload import TicketPayload


class CheckInTicketUseCase:
    """
    Door scan of a QR ticket.

    The first scan of a paid booking marks it checked in; every later scan
    reports the original timestamp and changes nothing.
    """

    def __init__(self, *, booking_command_repo: IBookingCommandRepo) -> None:
        self.booking_command_repo = booking_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
    ) -> Self:
        return cls(booking_command_repo=booking_command_repo)

    @staticmethod
    def _result(booking: Booking, outcome: CheckInOutcome) -> CheckInResult:
        metrics.record_check_in(outcome=outcome.value)
        return CheckInResult(
            outcome=outcome,
            booking_id=booking.id,
            show_id=booking.show_id,
            name=booking.name,
            email=booking.email,
            seats=booking.seats,
            checked_in_at=booking.checked_in_at,
        )

    @Logger.io
    async def check_in(self, *, show_id: UUID, booking_id: UUID) -> CheckInResult:
        """
        Raises:
            NotFoundError: No such booking on this show
            NotPaidError: Booking still pending
        """
        with self.tracer.start_as_current_span(
            'use_case.check_in_ticket',
            attributes={'show.id': str(show_id), 'booking.id': str(booking_id)},
        ) as span:
            booking = await self.booking_command_repo.get_by_id(
                show_id=show_id, booking_id=booking_id
            )
            if not booking:
                raise NotFoundError('INVALID TICKET: Not found.')
            if not booking.is_paid:
                raise NotPaidError()

            if booking.checked_in:
                span.set_attribute('check_in.outcome', CheckInOutcome.ALREADY_CHECKED_IN.value)
                return self._result(booking, CheckInOutcome.ALREADY_CHECKED_IN)

            checked_in = await self.booking_command_repo.mark_checked_in(
                show_id=show_id, booking_id=booking_id
            )
            if checked_in is None:
                # Lost the conditional update to a concurrent scan; report its timestamp
                winner = await self.booking_command_repo.get_by_id(
                    show_id=show_id, booking_id=booking_id
                )
                span.set_attribute('check_in.outcome', CheckInOutcome.ALREADY_CHECKED_IN.value)
                return self._result(winner or booking, CheckInOutcome.ALREADY_CHECKED_IN)

            Logger.base.info(f'✅ [CHECK-IN] Booking {booking_id} admitted, seats {booking.seats}')
            span.set_attribute('check_in.outcome', CheckInOutcome.VALID.value)
            return self._result(checked_in, CheckInOutcome.VALID)

    @Logger.io
    async def check_in_payload(self, *, payload: str) -> CheckInResult:
        """Check in from the raw text of a scanned QR code"""
        ticket = TicketPayload.from_json(payload)
        return await self.check_in(show_id=ticket.show_id, booking_id=ticket.booking_id)
