"""Exercise log routes."""

from fastapi import APIRouter, Depends, HTTPException
from models.database import MongoStore, get_store
from schemas.exercise_log import ExerciseLog, ExerciseLogCreate
from utils.helpers import serialize_document, serialize_documents
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/logs", tags=["logs"])


@router.post("", status_code=201)
async def create_log(payload: ExerciseLogCreate, store: MongoStore = Depends(get_store)):
    """Record one performed set. ``date`` defaults to the current time."""
    if not payload.exerciseId or not payload.reps or not payload.weight:
        logger.warning(f"Rejected log with missing fields: {payload.model_dump()}")
        raise HTTPException(status_code=400, detail="Missing required fields")

    if payload.reps <= 0 or payload.weight <= 0:
        raise HTTPException(status_code=400, detail="reps and weight must be positive")

    log_fields = payload.model_dump(exclude_none=True)
    log = ExerciseLog(**log_fields).model_dump()

    try:
        result = await store.logs.insert_one(log)
        log["_id"] = result.inserted_id
    except Exception as e:
        logger.error(f"Error creating log: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(f"Logged exercise {log['exerciseId']}: {log['reps']} x {log['weight']}")
    return serialize_document(log)


@router.get("/{exercise_id}")
async def get_logs(exercise_id: int, store: MongoStore = Depends(get_store)):
    """Get the logs of one exercise, newest first."""
    try:
        cursor = store.logs.find({"exerciseId": exercise_id}).sort("date", -1)
        logs = await cursor.to_list(length=None)
        return serialize_documents(logs)
    except Exception as e:
        logger.error(f"Error fetching logs for exercise {exercise_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
