from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, SecretStr

from src.platform.types.uuid7_utils_types import UtilsUUID7


class ShowCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    screen: str = Field(min_length=1)
    starts_at: datetime
    password: SecretStr  # ADMIN_PASSWORD

    model_config = {
        'json_schema_extra': {
            'example': {
                'name': 'Night Show',
                'screen': 'Screen 1',
                'starts_at': '2026-11-20T21:00:00+05:30',
                'password': 'admin123',
            }
        }
    }


class ShowResponse(BaseModel):
    id: UtilsUUID7
    name: str
    screen: str
    starts_at: datetime
    is_active: bool
    created_at: Optional[datetime] = None


class HeldSeatsResponse(BaseModel):
    """Seat map plus the seats nobody else can take right now"""

    model_config = {
        'json_schema_extra': {
            'example': {
                'show_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'held_seats': ['A1', 'A2', 'C7'],
                'rows': ['A', 'B', 'C', 'D', 'E', 'F'],
                'seats_per_row': 10,
                'ticket_price': 30,
                'currency': 'INR',
                'hold_seconds': 600,
            }
        }
    }

    show_id: UtilsUUID7
    held_seats: List[str]
    rows: List[str]
    seats_per_row: int
    ticket_price: int
    currency: str
    hold_seconds: int
