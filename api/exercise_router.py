"""Exercise catalog routes."""

from fastapi import APIRouter, Depends, HTTPException
from models.database import MongoStore, get_store
from schemas.exercise import Exercise
from utils.helpers import serialize_document
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(store: MongoStore = Depends(get_store)):
    """Get all exercises sorted by id."""
    try:
        cursor = store.exercises.find().sort("id", 1)
        exercises = await cursor.to_list(length=None)

        results = []
        for exercise in exercises:
            serialize_document(exercise)
            try:
                Exercise(**exercise)
            except Exception as e:
                # Seeded externally, so keep the entry and flag it
                logger.warning(f"Invalid exercise entry format: {e}, entry: {exercise}")
            results.append(exercise)

        return results

    except Exception as e:
        logger.error(f"Error fetching exercises: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{exercise_id}")
async def get_exercise(exercise_id: int, store: MongoStore = Depends(get_store)):
    """Get a single exercise by its numeric id."""
    try:
        exercise = await store.exercises.find_one({"id": exercise_id})
    except Exception as e:
        logger.error(f"Error fetching exercise {exercise_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail={"message": "Server error"})

    if not exercise:
        raise HTTPException(status_code=404, detail={"message": "Exercise not found"})

    return serialize_document(exercise)
