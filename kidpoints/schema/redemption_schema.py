from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from kidpoints.schema.reward_schema import RewardOut


class RedemptionRequestCreate(BaseModel):
    reward_id: int
    note: Optional[str] = None


class RedemptionStatusUpdate(BaseModel):
    status: str


class RedemptionRequestOut(BaseModel):
    id: int
    child_id: int
    reward_id: int
    request_date: datetime
    status: str
    note: Optional[str] = None
    reward: Optional[RewardOut] = None

    class Config:
        from_attributes = True
