from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.platform.types.uuid7_utils_types import UtilsUUID7


class TicketScanRequest(BaseModel):
    payload: str  # Raw QR text: {"bookingId": ..., "showId": ...}


class CheckInResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'status': 'VALID TICKET',
                'outcome': 'valid',
                'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'show_id': '01936d8f-1111-7c4e-a9c5-123456789abc',
                'name': 'Asha',
                'email': 'asha@example.com',
                'seats': ['A1', 'A2'],
                'checked_in_at': '2026-11-20T20:41:07+00:00',
            }
        }
    }

    status: str
    outcome: str
    booking_id: UtilsUUID7
    show_id: UtilsUUID7
    name: str
    email: str
    seats: List[str]
    checked_in_at: Optional[datetime] = None
