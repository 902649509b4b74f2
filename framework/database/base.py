from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Lifecycle contract for a storage backend."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass
