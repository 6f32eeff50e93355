import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

from database.BASE import StorageError
from database.SubmissionOperations import SubmissionOperations
from models.SubmissionModel import SubmissionModel


def make_submission(**overrides):
    data = {"name": "Ada", "email": "ada@example.com", "message": "Hello"}
    data.update(overrides)
    return SubmissionModel(**data)


@pytest.mark.asyncio
async def test_create_success():
    inserted_id = ObjectId()
    db = MagicMock()
    db.submissions.insert_one = AsyncMock(return_value=MagicMock(inserted_id=inserted_id))
    db_ops = SubmissionOperations(db)

    stored = await db_ops.create(make_submission(subject=" Hi "))

    assert stored["_id"] == inserted_id
    assert stored["subject"] == "Hi"
    inserted = db.submissions.insert_one.call_args.args[0]
    assert set(inserted) >= {"name", "email", "subject", "message", "createdAt"}


@pytest.mark.asyncio
async def test_create_failure():
    db = MagicMock()
    db.submissions.insert_one = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))
    db_ops = SubmissionOperations(db)

    with pytest.raises(StorageError):
        await db_ops.create(make_submission())


@pytest.mark.asyncio
async def test_create_without_connection():
    db_ops = SubmissionOperations(None)
    with pytest.raises(StorageError):
        await db_ops.create(make_submission())


@pytest.mark.asyncio
async def test_get_sorts_newest_first():
    documents = [{"_id": ObjectId(), "name": "B"}, {"_id": ObjectId(), "name": "A"}]
    db = MagicMock()
    cursor = db.submissions.find.return_value.sort.return_value
    cursor.to_list = AsyncMock(return_value=documents)
    db_ops = SubmissionOperations(db)

    result = await db_ops.get()

    assert result == documents
    db.submissions.find.assert_called_once_with({})
    db.submissions.find.return_value.sort.assert_called_once_with("createdAt", DESCENDING)


@pytest.mark.asyncio
async def test_get_failure():
    db = MagicMock()
    cursor = db.submissions.find.return_value.sort.return_value
    cursor.to_list = AsyncMock(side_effect=AutoReconnect("connection reset"))
    db_ops = SubmissionOperations(db)

    with pytest.raises(StorageError):
        await db_ops.get()


@pytest.mark.asyncio
async def test_get_without_connection():
    db_ops = SubmissionOperations(None)
    with pytest.raises(StorageError):
        await db_ops.get()
