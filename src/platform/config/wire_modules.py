"""
Wire Modules Configuration

Modules whose `depends()` classmethods use Provide[Container.xxx].
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    check_in_ticket_use_case,
    confirm_payment_use_case,
    create_show_use_case,
    reserve_and_confirm_immediately_use_case,
    reserve_seats_use_case,
)
from src.service.ticketing.app.query import list_held_seats_use_case, list_shows_use_case
from src.service.ticketing.driving_adapter.http_controller import show_controller


WIRE_MODULES: list[ModuleType] = [
    reserve_seats_use_case,
    confirm_payment_use_case,
    reserve_and_confirm_immediately_use_case,
    check_in_ticket_use_case,
    create_show_use_case,
    list_held_seats_use_case,
    list_shows_use_case,
    show_controller,
]
