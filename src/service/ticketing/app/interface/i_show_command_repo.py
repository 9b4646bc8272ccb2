from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.show_entity import ShowEntity


class IShowCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, show: ShowEntity) -> ShowEntity:
        pass
