from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.ticketing.app.command.confirm_payment_use_case import ConfirmPaymentUseCase
from src.service.ticketing.app.command.reserve_and_confirm_immediately_use_case import (
    ReserveAndConfirmImmediatelyUseCase,
)
from src.service.ticketing.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.ticketing.app.dto.confirmation_result import ConfirmationResult
from src.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    ConfirmationResponse,
    PaymentConfirmRequest,
    ReservationResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_confirmation_response(result: ConfirmationResult, *, message: str) -> ConfirmationResponse:
    return ConfirmationResponse(
        message=message,
        booking_id=result.booking_id,
        status=result.status.value,
        amount=result.amount,
        seats=result.seats,
        already_confirmed=result.already_confirmed,
        ticket_delivered=result.ticket_delivered,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> ReservationResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('show_id', str(request.show_id))
        span.set_attribute('seats', request.seats)

        result = await use_case.reserve(
            show_id=request.show_id,
            seats=request.seats,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )

        return ReservationResponse(
            booking_id=result.booking_id,
            show_id=result.show_id,
            seats=result.seats,
            amount=result.amount,
            currency=result.currency,
            order_id=result.order_id,
            key_id=result.key_id,
            amount_minor=result.amount_minor,
            hold_expires_at=result.hold_expires_at,
        )


@router.post('/test', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_test_booking(
    request: BookingCreateRequest,
    use_case: ReserveAndConfirmImmediatelyUseCase = Depends(
        ReserveAndConfirmImmediatelyUseCase.depends
    ),
) -> ConfirmationResponse:
    result = await use_case.reserve_and_confirm(
        show_id=request.show_id,
        seats=request.seats,
        name=request.name,
        email=request.email,
        phone=request.phone,
    )
    return _to_confirmation_response(
        result, message='Booking successful (Test Mode)! Check your email.'
    )


@router.post('/{show_id}/{booking_id}/confirm')
@Logger.io
async def confirm_booking(
    show_id: UtilsUUID7,
    booking_id: UtilsUUID7,
    request: PaymentConfirmRequest,
    use_case: ConfirmPaymentUseCase = Depends(ConfirmPaymentUseCase.depends),
) -> ConfirmationResponse:
    result = await use_case.confirm(
        show_id=show_id,
        booking_id=booking_id,
        order_id=request.order_id,
        payment_id=request.payment_id,
        signature=request.signature,
    )
    message = (
        'This booking is already confirmed.'
        if result.already_confirmed
        else 'Booking successful! Check your email for the QR code.'
    )
    return _to_confirmation_response(result, message=message)
