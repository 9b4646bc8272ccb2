from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.ticketing.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from src.service.ticketing.app.dto.check_in_result import CheckInResult
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    CheckInResponse,
    TicketScanRequest,
)


router = APIRouter()


def _to_response(result: CheckInResult, response: Response) -> CheckInResponse:
    # ALREADY CHECKED IN is answered with 409
    if not result.is_valid:
        response.status_code = status.HTTP_409_CONFLICT
    return CheckInResponse(
        status='VALID TICKET' if result.is_valid else 'ALREADY CHECKED IN',
        outcome=result.outcome.value,
        booking_id=result.booking_id,
        show_id=result.show_id,
        name=result.name,
        email=result.email,
        seats=result.seats,
        checked_in_at=result.checked_in_at,
    )


@router.get('/{booking_id}/{show_id}/validate')
@Logger.io
async def validate_ticket(
    booking_id: UtilsUUID7,
    show_id: UtilsUUID7,
    response: Response,
    use_case: CheckInTicketUseCase = Depends(CheckInTicketUseCase.depends),
) -> CheckInResponse:
    result = await use_case.check_in(show_id=show_id, booking_id=booking_id)
    return _to_response(result, response)


@router.post('/validate')
@Logger.io
async def validate_scanned_ticket(
    request: TicketScanRequest,
    response: Response,
    use_case: CheckInTicketUseCase = Depends(CheckInTicketUseCase.depends),
) -> CheckInResponse:
    result = await use_case.check_in_payload(payload=request.payload)
    return _to_response(result, response)
