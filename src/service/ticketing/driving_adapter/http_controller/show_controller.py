from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.ticketing.app.command.create_show_use_case import CreateShowUseCase
from src.service.ticketing.app.query.list_held_seats_use_case import ListHeldSeatsUseCase
from src.service.ticketing.app.query.list_shows_use_case import ListShowsUseCase
from src.service.ticketing.app.service.booking_request import seat_grid_from
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.driving_adapter.http_controller.schema.show_schema import (
    HeldSeatsResponse,
    ShowCreateRequest,
    ShowResponse,
)


router = APIRouter()
admin_router = APIRouter()


def _to_response(show: ShowEntity) -> ShowResponse:
    return ShowResponse(
        id=show.id,
        name=show.name,
        screen=show.screen,
        starts_at=show.starts_at,
        is_active=show.is_active,
        created_at=show.created_at,
    )


@inject
def get_settings(settings: Settings = Depends(Provide[Container.config_service])) -> Settings:
    return settings


@admin_router.post('/show', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_show(
    request: ShowCreateRequest,
    use_case: CreateShowUseCase = Depends(CreateShowUseCase.depends),
) -> ShowResponse:
    show = await use_case.create_show(
        name=request.name,
        screen=request.screen,
        starts_at=request.starts_at,
        admin_password=request.password.get_secret_value(),
    )
    return _to_response(show)


@router.get('')
@Logger.io
async def list_shows(
    use_case: ListShowsUseCase = Depends(ListShowsUseCase.depends),
) -> List[ShowResponse]:
    shows = await use_case.list_active()
    return [_to_response(show) for show in shows]


@router.get('/{show_id}/held-seats')
@Logger.io
async def list_held_seats(
    show_id: UtilsUUID7,
    use_case: ListHeldSeatsUseCase = Depends(ListHeldSeatsUseCase.depends),
    settings: Settings = Depends(get_settings),
) -> HeldSeatsResponse:
    held_seats = await use_case.list_held_seats(show_id=show_id)
    grid = seat_grid_from(settings)
    return HeldSeatsResponse(
        show_id=show_id,
        held_seats=held_seats,
        rows=grid.row_labels,
        seats_per_row=grid.seats_per_row,
        ticket_price=settings.TICKET_PRICE,
        currency=settings.CURRENCY,
        hold_seconds=settings.SEAT_HOLD_MINUTES * 60,
    )
