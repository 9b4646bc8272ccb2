from datetime import datetime
import hmac
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.ticketing.domain.entity.show_entity import ShowEntity


class CreateShowUseCase:
    def __init__(self, *, show_command_repo: IShowCommandRepo, settings: Settings) -> None:
        self.show_command_repo = show_command_repo
        self.settings = settings

    @classmethod
    @inject
    def depends(
        cls,
        show_command_repo: IShowCommandRepo = Depends(Provide[Container.show_command_repo]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(show_command_repo=show_command_repo, settings=settings)

    @Logger.io
    async def create_show(
        self, *, name: str, screen: str, starts_at: datetime, admin_password: str
    ) -> ShowEntity:
        expected = self.settings.ADMIN_PASSWORD.get_secret_value()
        if not hmac.compare_digest(admin_password.encode(), expected.encode()):
            raise AuthenticationError('Invalid admin password')

        show = ShowEntity.create(
            id=uuid_utils.uuid7(), name=name, screen=screen, starts_at=starts_at
        )
        created = await self.show_command_repo.create(show=show)

        Logger.base.info(
            f'🎬 [SHOW] Created "{created.name}" on {created.screen} at {created.starts_at}'
        )
        return created
