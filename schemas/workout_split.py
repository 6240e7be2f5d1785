"""Workout split collection and request schemas."""

from typing import List
from pydantic import BaseModel, Field


class WorkoutSplit(BaseModel):
    """Workout split collection model."""
    splitId: int = Field(..., description="Sequentially assigned split identifier")
    split_name: str = Field(..., description="Name of the split")
    exercises: List[int] = Field(default_factory=list, description="Ordered exercise id references")


class SplitCreate(BaseModel):
    """Body of POST /splits."""
    split_name: str = Field(..., description="Name of the split")
    exercises: List[int] = Field(default_factory=list, description="Initial exercise ids")


class SplitAddExercise(BaseModel):
    """Body of POST /splits/{splitId}/add-exercise."""
    exerciseId: int = Field(..., description="Exercise id to append")


class SplitExerciseChanges(BaseModel):
    """Body of PATCH /splits/{splitId}/exercises."""
    add: List[int] = Field(default_factory=list, description="Exercise ids to add")
    remove: List[int] = Field(default_factory=list, description="Exercise ids to remove")


class SplitReplaceExercises(BaseModel):
    """Body of PUT /splits/{splitId}."""
    exercises: List[int] = Field(..., description="Final exercise list, stored as given")


class SplitRename(BaseModel):
    """Body of PATCH /splits/{splitId}."""
    split_name: str = Field(..., description="New split name")


class ChangeSummary(BaseModel):
    """Outcome of an add/remove reconciliation."""
    added: List[int]
    removed: int
    totalExercises: int
