"""Workout split routes."""

from fastapi import APIRouter, Depends, HTTPException
from pymongo import ReturnDocument

from models.database import MongoStore, get_store
from schemas.workout_split import (
    ChangeSummary,
    SplitAddExercise,
    SplitCreate,
    SplitExerciseChanges,
    SplitRename,
    SplitReplaceExercises,
    WorkoutSplit,
)
from services.split_service import allocate_split_id, reconcile_exercises
from utils.helpers import serialize_document, serialize_documents
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/splits", tags=["splits"])

SPLIT_NOT_FOUND = "Split not found"


async def _update_split(store: MongoStore, split_id: int, update: dict):
    """Apply ``update`` to one split and return the updated document, or None."""
    return await store.splits.find_one_and_update(
        {"splitId": split_id},
        update,
        return_document=ReturnDocument.AFTER,
    )


@router.get("")
async def list_splits(store: MongoStore = Depends(get_store)):
    """Get all workout splits."""
    try:
        splits = await store.splits.find().to_list(length=None)
        return serialize_documents(splits)
    except Exception as e:
        logger.error(f"Error fetching splits: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{split_id}")
async def get_split(split_id: int, store: MongoStore = Depends(get_store)):
    """Get a single split by splitId."""
    try:
        split = await store.splits.find_one({"splitId": split_id})
    except Exception as e:
        logger.error(f"Error fetching split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if not split:
        raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

    return serialize_document(split)


@router.post("", status_code=201)
async def create_split(payload: SplitCreate, store: MongoStore = Depends(get_store)):
    """Create a split with the next sequential splitId."""
    try:
        split_id = await allocate_split_id(store)
        split = WorkoutSplit(
            splitId=split_id,
            split_name=payload.split_name,
            exercises=payload.exercises,
        ).model_dump()

        result = await store.splits.insert_one(split)
        split["_id"] = result.inserted_id

        logger.info(f"Created split {split_id}: {payload.split_name}")
        return serialize_document(split)

    except Exception as e:
        logger.error(f"Error creating new split: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{split_id}/add-exercise")
async def add_exercise(
    split_id: int,
    payload: SplitAddExercise,
    store: MongoStore = Depends(get_store),
):
    """Append one exercise id to a split.

    No de-duplication happens here; use PATCH /splits/{split_id}/exercises
    for reconciled changes.
    """
    try:
        split = await _update_split(store, split_id, {"$push": {"exercises": payload.exerciseId}})
    except Exception as e:
        logger.error(f"Error updating split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if not split:
        raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

    return serialize_document(split)


@router.patch("/{split_id}/exercises")
async def change_exercises(
    split_id: int,
    payload: SplitExerciseChanges,
    store: MongoStore = Depends(get_store),
):
    """Add and remove exercises, keeping the list ordered and duplicate free."""
    try:
        split = await store.splits.find_one({"splitId": split_id})
        if not split:
            raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

        result = reconcile_exercises(split.get("exercises", []), payload.add, payload.remove)

        updated = await _update_split(store, split_id, {"$set": {"exercises": result.exercises}})
        if not updated:
            # Deleted between the read and the write
            raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

        changes = ChangeSummary(
            added=result.added,
            removed=result.removed,
            totalExercises=result.total_exercises,
        )
        logger.info(
            f"Updated exercises of split {split_id}: "
            f"+{len(result.added)} -{result.removed} total={result.total_exercises}"
        )
        return {"split": serialize_document(updated), "changes": changes.model_dump()}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating exercises of split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{split_id}")
async def replace_exercises(
    split_id: int,
    payload: SplitReplaceExercises,
    store: MongoStore = Depends(get_store),
):
    """Overwrite a split's exercise list exactly as given."""
    try:
        split = await _update_split(store, split_id, {"$set": {"exercises": payload.exercises}})
    except Exception as e:
        logger.error(f"Error replacing exercises of split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if not split:
        raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

    return serialize_document(split)


@router.patch("/{split_id}")
async def rename_split(
    split_id: int,
    payload: SplitRename,
    store: MongoStore = Depends(get_store),
):
    """Change a split's name."""
    try:
        split = await _update_split(store, split_id, {"$set": {"split_name": payload.split_name}})
    except Exception as e:
        logger.error(f"Error renaming split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if not split:
        raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

    return serialize_document(split)


@router.delete("/{split_id}")
async def delete_split(split_id: int, store: MongoStore = Depends(get_store)):
    """Delete a split. Its splitId is not reused."""
    try:
        split = await store.splits.find_one_and_delete({"splitId": split_id})
    except Exception as e:
        logger.error(f"Error deleting split {split_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if not split:
        raise HTTPException(status_code=404, detail=SPLIT_NOT_FOUND)

    logger.info(f"Deleted split {split_id}")
    return {
        "message": "Split deleted successfully",
        "deletedSplit": serialize_document(split),
    }
