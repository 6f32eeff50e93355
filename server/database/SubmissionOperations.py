import logging
from pymongo import DESCENDING
from pymongo.errors import PyMongoError
from database.BASE import BaseDatabaseOperation, StorageError
from models.SubmissionModel import SubmissionModel

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class SubmissionOperations(BaseDatabaseOperation):
    async def create(self, submission: SubmissionModel) -> dict:
        if self.db is None:
            raise StorageError("Database is not connected")
        try:
            submission_data = submission.model_dump()
            result = await self.db.submissions.insert_one(submission_data)
        except PyMongoError as e:
            logger.critical(f"Error adding submission to db : {e}")
            raise StorageError(str(e)) from e
        submission_data["_id"] = result.inserted_id
        logger.info(f"Stored submission {result.inserted_id}")
        return submission_data

    async def get(self) -> list:
        if self.db is None:
            raise StorageError("Database is not connected")
        try:
            cursor = self.db.submissions.find({}).sort("createdAt", DESCENDING)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error retrieving submissions: {e}")
            raise StorageError(str(e)) from e
