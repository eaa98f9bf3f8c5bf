"""Exercise Schemas — response contracts for exercise creation and the exercise log.

Invariants:
    - date is always the calendar-date string ("Sun Jan 15 2023")
    - ExerciseResponse._id is the USER's id, not the exercise's
    - LogResponse.count == len(LogResponse.log)
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponse(BaseModel):
    """Newly logged exercise, merged with its owner."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    description: str
    duration: int
    date: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """A user's filtered exercise log."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    count: int
    log: list[LogEntry]
