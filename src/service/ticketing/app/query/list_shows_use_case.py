from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.domain.entity.show_entity import ShowEntity


class ListShowsUseCase:
    def __init__(self, show_query_repo: IShowQueryRepo) -> None:
        self.show_query_repo = show_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        show_query_repo: IShowQueryRepo = Depends(Provide[Container.show_query_repo]),
    ) -> Self:
        return cls(show_query_repo=show_query_repo)

    @Logger.io
    async def list_active(self) -> List[ShowEntity]:
        """Active shows, earliest first"""
        shows = await self.show_query_repo.list_active()
        Logger.base.info(f'✅ [LIST_SHOWS] Found {len(shows)} active shows')
        return shows
