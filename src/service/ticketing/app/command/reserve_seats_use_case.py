from datetime import timedelta
import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
import uuid_utils
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import SeatConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.ticketing.app.dto.reservation_result import ReservationResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.app.service.booking_request import validate_booking_request
from src.service.ticketing.app.service.seat_conflict_checker import SeatConflictChecker
from src.service.ticketing.domain.entity.booking_entity import Booking


class ReserveSeatsUseCase:
    """
    Hold seats for a buyer while they pay at the gateway

    Flow:
    1. Validate purchaser, seats and show (Fail Fast)
    2. Two-stage conflict check: paid, then live pending
    3. Create the gateway order for len(seats) x TICKET_PRICE
    4. Insert the pending booking carrying the order id

    No lock spans steps 2-4. The hold lapses on its own after SEAT_HOLD_MINUTES.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        show_query_repo: IShowQueryRepo,
        seat_conflict_checker: SeatConflictChecker,
        payment_gateway: IPaymentGateway,
        settings: Settings,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.show_query_repo = show_query_repo
        self.seat_conflict_checker = seat_conflict_checker
        self.payment_gateway = payment_gateway
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
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            show_query_repo=show_query_repo,
            seat_conflict_checker=seat_conflict_checker,
            payment_gateway=payment_gateway,
            settings=settings,
        )

    @Logger.io
    async def reserve(
        self,
        *,
        show_id: UUID,
        seats: List[str],
        name: str,
        email: str,
        phone: str,
    ) -> ReservationResult:
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats', attributes={'show.id': str(show_id)}
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
            span.set_attribute('seat.count', len(requested))

            try:
                await self.seat_conflict_checker.ensure_seats_free(
                    show_id=show_id, seats=requested
                )
            except SeatConflictError as e:
                Logger.base.info(f'🚫 [HOLD] Seat {e.seat} on show {show_id}: {e.reason}')
                metrics.record_seat_hold(path='gateway', result=e.reason.replace(' ', '_'))
                raise

            amount = len(requested) * self.settings.TICKET_PRICE
            order = await self.payment_gateway.create_order(
                amount_minor=amount * 100,
                currency=self.settings.CURRENCY,
                receipt=f'receipt_{int(time.time() * 1000)}',
            )

            booking = Booking.create_pending(
                id=uuid_utils.uuid7(),
                show_id=show_id,
                seats=requested,
                purchaser=purchaser,
                amount=amount,
                payment_order_id=order.id,
            )
            created = await self.booking_command_repo.create(booking=booking)
            span.set_attribute('booking.id', str(created.id))

            Logger.base.info(
                f'🎟️ [HOLD] Booking {created.id} holds {requested} on show {show_id} '
                f'(order {order.id})'
            )
            metrics.record_seat_hold(path='gateway', result='created', seat_count=len(requested))

            return ReservationResult(
                booking_id=created.id,
                show_id=show_id,
                seats=created.seats,
                amount=created.amount,
                currency=order.currency,
                order_id=order.id,
                key_id=self.payment_gateway.key_id,
                amount_minor=order.amount,
                hold_expires_at=created.hold_expires_at(
                    window=timedelta(minutes=self.settings.SEAT_HOLD_MINUTES)
                ),
            )
