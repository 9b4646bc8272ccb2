from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.driven_adapter.model.show_model import ShowModel
from src.service.ticketing.driven_adapter.repo.booking_mapper import to_pg_uuid


class ShowQueryRepoImpl(IShowQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_show: ShowModel) -> ShowEntity:
        return ShowEntity(
            id=UUID(str(db_show.id)),
            name=db_show.name,
            screen=db_show.screen,
            starts_at=db_show.starts_at,
            is_active=db_show.is_active,
            created_at=db_show.created_at,
        )

    @Logger.io
    async def get_by_id(self, *, show_id: UUID) -> Optional[ShowEntity]:
        async with self.session_factory() as session:
            db_show = await session.get(ShowModel, to_pg_uuid(show_id))
            return self._to_entity(db_show) if db_show else None

    @Logger.io
    async def list_active(self) -> List[ShowEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ShowModel)
                .where(ShowModel.is_active.is_(True))
                .order_by(ShowModel.starts_at.asc())
            )
            return [self._to_entity(db_show) for db_show in result.scalars().all()]
