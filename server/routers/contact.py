import logging
from inspect import currentframe, getframeinfo
from typing import List

from fastapi import APIRouter, HTTPException, Depends, status

from db import get_db_ops
from database.BASE import BaseDatabaseOperation, StorageError
from database.SubmissionOperations import SubmissionOperations
from models.SubmissionModel import (
    ContactResponse,
    SubmissionModel,
    SubmissionRequest,
    SubmissionResponse,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

contact_router = APIRouter(prefix="/api/contact")

get_submission_ops = get_db_ops(SubmissionOperations)


@contact_router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact_form(
    request: SubmissionRequest,
    db_ops: BaseDatabaseOperation = Depends(get_submission_ops),
):
    submission = SubmissionModel(**request.model_dump())
    try:
        stored = await db_ops.create(submission)
    except StorageError as e:
        logger.error(f"Error saving submission: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail={'message': "Failed to save submission", 'currentFrame': getframeinfo(currentframe()), 'detail': str(e)})
    return {"message": "Form submitted successfully", "submission": stored}


@contact_router.get("", response_model=List[SubmissionResponse])
async def get_submissions(
    db_ops: BaseDatabaseOperation = Depends(get_submission_ops),
):
    try:
        return await db_ops.get()
    except StorageError as e:
        logger.error(f"Error retrieving submissions: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail={'message': "Failed to retrieve submissions", 'currentFrame': getframeinfo(currentframe()), 'detail': str(e)})
