import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from main import app
from database.BASE import BaseDatabaseOperation, StorageError
from routers.contact import get_submission_ops


class InMemorySubmissionOperations(BaseDatabaseOperation):
    """Stands in for the Mongo-backed store in route tests."""

    def __init__(self, db=None):
        super().__init__(db)
        self.documents = []
        self.fail = False

    async def create(self, submission):
        if self.fail:
            raise StorageError("connection refused")
        data = submission.model_dump()
        data["_id"] = ObjectId()
        self.documents.append(data)
        return data

    async def get(self):
        if self.fail:
            raise StorageError("connection refused")
        return sorted(self.documents, key=lambda doc: doc["createdAt"], reverse=True)


@pytest.fixture(scope="function")
def submission_store():
    return InMemorySubmissionOperations()


@pytest.fixture(scope="function")
def client(submission_store):
    # no context manager: the lifespan (and its Mongo connection) is skipped
    app.dependency_overrides[get_submission_ops] = lambda: submission_store
    yield TestClient(app)
    app.dependency_overrides.clear()
