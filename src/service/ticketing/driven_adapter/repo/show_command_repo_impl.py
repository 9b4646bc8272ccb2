from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.driven_adapter.model.show_model import ShowModel
from src.service.ticketing.driven_adapter.repo.booking_mapper import to_pg_uuid
from src.service.ticketing.driven_adapter.repo.show_query_repo_impl import ShowQueryRepoImpl


class ShowCommandRepoImpl(IShowCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, show: ShowEntity) -> ShowEntity:
        async with self.session_factory() as session:
            db_show = ShowModel(
                id=to_pg_uuid(show.id),
                name=show.name,
                screen=show.screen,
                starts_at=show.starts_at,
                is_active=show.is_active,
            )
            session.add(db_show)
            await session.commit()
            await session.refresh(db_show)
            return ShowQueryRepoImpl._to_entity(db_show)
