from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class BadgeBase(BaseModel):
    name: str = Field(min_length=1)
    description: str
    icon: str
    required_days: int = Field(ge=1)
    activity_type: str = Field(min_length=1)


class BadgeCreate(BadgeBase):
    pass


class BadgeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    required_days: Optional[int] = Field(default=None, ge=1)
    activity_type: Optional[str] = Field(default=None, min_length=1)


class Badge(BadgeBase):
    id: int
    parent_id: int

    class Config:
        from_attributes = True


class ChildBadgeOut(BaseModel):
    id: int
    child_id: int
    badge_id: int
    date_earned: datetime
    badge: Optional[Badge] = None

    class Config:
        from_attributes = True


class BadgeProgressOut(BaseModel):
    badge_id: int
    name: str
    activity_type: str
    required_days: int
    streak: int
    earned: bool


class AwardOut(BaseModel):
    child_id: int
    badge_id: int


class AllotResult(BaseModel):
    message: str
    awarded: List[AwardOut]
