"""Exercise logs collection schema."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator


class ExerciseLogCreate(BaseModel):
    """Body of POST /logs.

    Fields are optional here so that a missing value is reported as
    ``Missing required fields`` by the route rather than as a schema error.
    Numbers are strict: booleans and numeric strings are rejected.
    """
    exerciseId: Optional[StrictInt] = Field(None, description="Referenced exercise id")
    reps: Optional[StrictInt] = Field(None, description="Repetitions performed")
    weight: Optional[StrictFloat] = Field(None, description="Weight lifted")
    date: Optional[datetime] = Field(None, description="When the set was performed, defaults to now")


class ExerciseLog(BaseModel):
    """Exercise logs collection model."""
    exerciseId: int = Field(..., description="Referenced exercise id")
    reps: int = Field(..., gt=0, description="Repetitions performed")
    weight: float = Field(..., gt=0, description="Weight lifted")
    date: datetime = Field(default_factory=datetime.utcnow, description="When the set was performed (naive UTC)")

    @field_validator("date")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        """Store dates as naive UTC, the way MongoDB hands them back."""
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
