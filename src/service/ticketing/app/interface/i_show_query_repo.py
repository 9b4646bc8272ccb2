from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.ticketing.domain.entity.show_entity import ShowEntity


class IShowQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, show_id: UUID) -> Optional[ShowEntity]:
        pass

    @abstractmethod
    async def list_active(self) -> List[ShowEntity]:
        """Active shows, earliest start first"""
        pass
