from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.app.service.seat_conflict_checker import SeatConflictChecker
from src.service.ticketing.domain.seat_hold_domain import merge_held_seats


class ListHeldSeatsUseCase:
    """Seats nobody else can take right now: paid, or pending inside the hold window"""

    def __init__(
        self, *, booking_query_repo: IBookingQueryRepo, seat_conflict_checker: SeatConflictChecker
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.seat_conflict_checker = seat_conflict_checker

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        seat_conflict_checker: SeatConflictChecker = Depends(
            Provide[Container.seat_conflict_checker]
        ),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo, seat_conflict_checker=seat_conflict_checker
        )

    @Logger.io
    async def list_held_seats(self, *, show_id: UUID) -> List[str]:
        seat_groups = await self.booking_query_repo.list_held_seat_groups(
            show_id=show_id, since=self.seat_conflict_checker.live_since()
        )
        return merge_held_seats(seat_groups)
