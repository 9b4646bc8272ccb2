from datetime import datetime
from typing import AsyncContextManager, Callable, List, Sequence

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.repo.booking_mapper import to_entity, to_pg_uuid


class BookingQueryRepoImpl(IBookingQueryRepo):
    """Seat overlap uses the PostgreSQL array operator `seats && :requested`"""

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    async def _find_overlapping(self, *conditions) -> List[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel).where(*conditions).order_by(BookingModel.created_at)
            )
            return [to_entity(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def find_paid_overlapping(
        self, *, show_id: UUID, seats: Sequence[str]
    ) -> List[Booking]:
        return await self._find_overlapping(
            BookingModel.show_id == to_pg_uuid(show_id),
            BookingModel.status == BookingStatus.PAID.value,
            BookingModel.seats.overlap(list(seats)),
        )

    @Logger.io
    async def find_live_pending_overlapping(
        self, *, show_id: UUID, seats: Sequence[str], since: datetime
    ) -> List[Booking]:
        return await self._find_overlapping(
            BookingModel.show_id == to_pg_uuid(show_id),
            BookingModel.status == BookingStatus.PENDING.value,
            BookingModel.created_at > since,
            BookingModel.seats.overlap(list(seats)),
        )

    @Logger.io
    async def list_held_seat_groups(self, *, show_id: UUID, since: datetime) -> List[List[str]]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel.seats).where(
                    BookingModel.show_id == to_pg_uuid(show_id),
                    or_(
                        BookingModel.status == BookingStatus.PAID.value,
                        and_(
                            BookingModel.status == BookingStatus.PENDING.value,
                            BookingModel.created_at > since,
                        ),
                    ),
                )
            )
            return [list(seats) for seats in result.scalars().all()]
