import attrs
from uuid_utils import UUID

from src.service.ticketing.domain.enum.booking_status import BookingStatus


@attrs.define(frozen=True)
class ConfirmationResult:
    booking_id: UUID
    status: BookingStatus
    amount: int
    seats: list[str]
    already_confirmed: bool = False
    ticket_delivered: bool = False
