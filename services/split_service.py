"""Split id sequencing and exercise-list reconciliation."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pymongo import ReturnDocument

from models.database import MongoStore
from utils.logger import setup_logger

logger = setup_logger(__name__)

SPLIT_ID_COUNTER = "splitId"


@dataclass
class ReconcileResult:
    """New exercise list plus the change statistics reported to clients."""
    exercises: List[int]
    removed: int
    added: List[int] = field(default_factory=list)

    @property
    def total_exercises(self) -> int:
        return len(self.exercises)


def next_split_id(current_max: Optional[int]) -> int:
    """Return the id following ``current_max``, starting at 1.

    ``allocate_split_id`` seeds its counter from this, so an allocation never
    returns less than ``next_split_id(stored max)``.
    """
    if current_max is None:
        return 1
    return current_max + 1


def reconcile_exercises(
    current: Iterable[int],
    to_add: Iterable[int],
    to_remove: Iterable[int],
) -> ReconcileResult:
    """Apply a remove-set and then an add-set to a split's exercise list.

    Removal runs first, so an id present in both sets ends up in the list.
    Survivors keep their relative order and new ids are appended in the
    order given. The result never holds the same id twice.
    """
    current = list(current)
    added = list(to_add)
    remove_set = set(to_remove)

    survivors = [exercise_id for exercise_id in current if exercise_id not in remove_set]
    removed = len(current) - len(survivors)

    exercises: List[int] = []
    seen = set()
    for exercise_id in survivors + added:
        if exercise_id in seen:
            continue
        seen.add(exercise_id)
        exercises.append(exercise_id)

    return ReconcileResult(exercises=exercises, removed=removed, added=added)


async def current_max_split_id(store: MongoStore) -> Optional[int]:
    """Highest splitId stored, or None when there are no splits."""
    last_split = await store.splits.find_one({}, sort=[("splitId", -1)])
    if not last_split:
        return None
    return last_split["splitId"]


async def allocate_split_id(store: MongoStore) -> int:
    """Reserve the next splitId.

    The counter document is first raised to the highest stored splitId so
    that externally inserted splits are respected, then incremented
    atomically. Concurrent callers never receive the same id, and the id of
    a deleted split is not handed out again.
    """
    current_max = await current_max_split_id(store)
    # the counter holds the last id handed out
    floor = next_split_id(current_max) - 1

    await store.counters.update_one(
        {"_id": SPLIT_ID_COUNTER},
        {"$max": {"seq": floor}},
        upsert=True,
    )
    counter = await store.counters.find_one_and_update(
        {"_id": SPLIT_ID_COUNTER},
        {"$inc": {"seq": 1}},
        return_document=ReturnDocument.AFTER,
    )

    split_id = counter["seq"]
    logger.debug(f"Allocated splitId {split_id} (stored max: {current_max})")
    return split_id
