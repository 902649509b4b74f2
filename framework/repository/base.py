"""
Repository abstract base class and generic SQLModel implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; the storage primitives the service layer relies on."""

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Get all entities ordered by id."""

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, or None when absent."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update entity; returns it with its storage-assigned id."""

    @abstractmethod
    async def delete_by_id(self, id: int) -> None:
        """Delete entity by ID; no-op when absent."""


class BaseRepository(IRepository[T]):
    """Generic repository over an AsyncSession. Each write commits on its own."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def find_all(self) -> List[T]:
        statement = select(self.model).order_by(self.model.id)
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_by_id(self, id: int) -> Optional[T]:
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def save(self, entity: T) -> T:
        self.session.add(entity)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(entity)
        return entity

    async def delete_by_id(self, id: int) -> None:
        entity = await self.find_by_id(id)
        if entity is None:
            return
        await self.session.delete(entity)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
