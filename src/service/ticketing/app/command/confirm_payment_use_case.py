from datetime import datetime, timedelta, timezone
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidSignatureError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.ticketing.app.dto.confirmation_result import ConfirmationResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.service.ticket_dispatcher import TicketDispatcher
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.value_object.payment_proof import PaymentProof


class ConfirmPaymentUseCase:
    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        ticket_dispatcher: TicketDispatcher,
        settings: Settings,
    ) -> None:
        self.booking_command_repo = booking_command_repo
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
        ticket_dispatcher: TicketDispatcher = Depends(Provide[Container.ticket_dispatcher]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            ticket_dispatcher=ticket_dispatcher,
            settings=settings,
        )

    @staticmethod
    def _already_confirmed(booking: Booking) -> ConfirmationResult:
        metrics.record_confirmation(result='already_confirmed')
        return ConfirmationResult(
            booking_id=booking.id,
            status=booking.status,
            amount=booking.amount,
            seats=booking.seats,
            already_confirmed=True,
        )

    @Logger.io
    async def confirm(
        self,
        *,
        show_id: UUID,
        booking_id: UUID,
        order_id: str,
        payment_id: str,
        signature: str,
    ) -> ConfirmationResult:
        """
        Verify the gateway's payment proof and move the booking pending -> paid.

        Idempotent: a paid booking is reported as already confirmed and left
        untouched, whatever proof comes with the repeat call.

        Raises:
            NotFoundError: No such booking on this show
            InvalidSignatureError: Proof does not verify or names another order
        """
        with self.tracer.start_as_current_span(
            'use_case.confirm_payment',
            attributes={'show.id': str(show_id), 'booking.id': str(booking_id)},
        ) as span:
            booking = await self.booking_command_repo.get_by_id(
                show_id=show_id, booking_id=booking_id
            )
            if not booking:
                raise NotFoundError('Booking not found')

            if booking.is_paid:
                return self._already_confirmed(booking)

            proof = PaymentProof(order_id=order_id, payment_id=payment_id, signature=signature)
            signature_ok = proof.verify(secret=self.settings.PAYMENT_KEY_SECRET.get_secret_value())
            order_matches = (
                booking.payment_order_id is None or booking.payment_order_id == order_id
            )
            if not (signature_ok and order_matches):
                metrics.record_confirmation(result='invalid_signature')
                raise InvalidSignatureError()

            paid = await self.booking_command_repo.mark_as_paid(
                booking=booking.mark_as_paid(payment_id=payment_id)
            )
            if paid is None:
                # A concurrent confirmation won the pending -> paid update
                return self._already_confirmed(booking)

            hold_expired = not booking.holds_seats(
                now=datetime.now(timezone.utc),
                window=timedelta(minutes=self.settings.SEAT_HOLD_MINUTES),
            )
            span.set_attribute('booking.hold_expired', hold_expired)
            if hold_expired:
                Logger.base.warning(f'⏰ [CONFIRM] Booking {paid.id} paid after its hold expired')

            Logger.base.info(f'💰 [CONFIRM] Booking {paid.id} paid (payment {payment_id})')
            metrics.record_confirmation(result='confirmed')

            delivered = await self.ticket_dispatcher.dispatch(booking=paid)
            span.set_attribute('ticket.delivered', delivered)

            return ConfirmationResult(
                booking_id=paid.id,
                status=paid.status,
                amount=paid.amount,
                seats=paid.seats,
                ticket_delivered=delivered,
            )
