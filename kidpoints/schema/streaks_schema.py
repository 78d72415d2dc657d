from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ActivityRecord(BaseModel):
    """One logged activity, as read by the badge evaluator."""
    child_id: int
    description: str
    points: int
    date: datetime

    class Config:
        from_attributes = True


class BadgeRecord(BaseModel):
    """A badge definition, as read by the badge evaluator."""
    id: int
    name: str
    required_days: int
    activity_type: str
    parent_id: Optional[int] = None

    class Config:
        from_attributes = True


class BadgeAward(BaseModel):
    child_id: int
    badge_id: int

    class Config:
        frozen = True
