from typing import Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt


class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1)


class TodoUpdate(BaseModel):
    """Full replacement: every field is required."""

    title: str = Field(..., min_length=1)
    completed: StrictBool
    order: StrictInt


class TodoPatch(BaseModel):
    """Partial update: only the fields sent by the client are applied."""

    title: Optional[str] = Field(None, min_length=1)
    completed: Optional[StrictBool] = None
    order: Optional[StrictInt] = None


class TodoOut(BaseModel):
    id: str
    title: str
    completed: bool
    order: int
    url: str
