"""Exercise collection schema."""

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """Exercise reference catalog model."""
    id: int = Field(..., description="Numeric exercise identifier")
    name: str = Field(..., description="Exercise name")
    muscleGroup: str = Field(..., description="Primary muscle group")
    equipment: str = Field(..., description="Equipment used")
