from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import ValidationError


@attrs.define
class ShowEntity:
    id: UUID
    name: str
    screen: str
    starts_at: datetime
    is_active: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, id: UUID, name: str, screen: str, starts_at: datetime) -> 'ShowEntity':
        for field, value in (('name', name), ('screen', screen)):
            if not value or not value.strip():
                raise ValidationError(f'Show {field} cannot be empty', field=field)
        return cls(id=id, name=name.strip(), screen=screen.strip(), starts_at=starts_at)
