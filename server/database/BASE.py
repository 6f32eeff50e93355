from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised when the document store fails to read or write."""


class BaseDatabaseOperation(ABC):
    def __init__(self, db):
        self.db = db

    @abstractmethod
    async def create(self, data):
        pass

    @abstractmethod
    async def get(self):
        pass
