from typing import List, Sequence, Tuple

from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import NotFoundError
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.domain.value_object.purchaser_info import PurchaserInfo
from src.service.ticketing.domain.value_object.seat_grid import SeatGrid


def seat_grid_from(settings: Settings) -> SeatGrid:
    return SeatGrid(rows=settings.SEAT_ROWS, seats_per_row=settings.SEATS_PER_ROW)


async def validate_booking_request(
    *,
    show_query_repo: IShowQueryRepo,
    settings: Settings,
    show_id: UUID,
    seats: Sequence[str] | None,
    name: str | None,
    email: str | None,
    phone: str | None,
) -> Tuple[ShowEntity, List[str], PurchaserInfo]:
    """
    Input checks shared by every path that writes a booking.

    Raises:
        ValidationError: missing purchaser field, empty/duplicate/unknown seat
        NotFoundError: show missing or no longer active
    """
    purchaser = PurchaserInfo.create(name=name, email=email, phone=phone)
    requested = seat_grid_from(settings).validate_selection(seats)

    show = await show_query_repo.get_by_id(show_id=show_id)
    if not show or not show.is_active:
        raise NotFoundError('Show not found')

    return show, requested, purchaser
