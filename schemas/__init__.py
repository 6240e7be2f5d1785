"""Collection and request schemas organized by collection type."""

from schemas.exercise import Exercise
from schemas.workout_split import (
    WorkoutSplit,
    SplitCreate,
    SplitAddExercise,
    SplitExerciseChanges,
    SplitReplaceExercises,
    SplitRename,
    ChangeSummary,
)
from schemas.exercise_log import ExerciseLog, ExerciseLogCreate

__all__ = [
    "Exercise",
    "WorkoutSplit",
    "SplitCreate",
    "SplitAddExercise",
    "SplitExerciseChanges",
    "SplitReplaceExercises",
    "SplitRename",
    "ChangeSummary",
    "ExerciseLog",
    "ExerciseLogCreate",
]
