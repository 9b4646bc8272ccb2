from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID

from src.service.ticketing.domain.enum.check_in_outcome import CheckInOutcome


@attrs.define(frozen=True)
class CheckInResult:
    """Status report of a ticket scan; a repeated scan is not an error"""

    outcome: CheckInOutcome
    booking_id: UUID
    show_id: UUID
    name: str
    email: str
    seats: list[str]
    checked_in_at: Optional[datetime] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome == CheckInOutcome.VALID
