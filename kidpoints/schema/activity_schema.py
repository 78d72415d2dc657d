from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ActivityCreate(BaseModel):
    child_id: int
    description: str = Field(min_length=1)
    points: int
    date: Optional[datetime] = None


class ActivityOut(BaseModel):
    id: int
    child_id: int
    description: str
    points: int
    date: datetime

    class Config:
        from_attributes = True
