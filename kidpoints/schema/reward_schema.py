from pydantic import BaseModel, Field
from typing import Optional


class RewardBase(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    points_cost: int = Field(ge=0)
    is_global: bool = True


class RewardCreate(RewardBase):
    pass


class RewardUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    points_cost: Optional[int] = Field(default=None, ge=0)
    is_global: Optional[bool] = None


class RewardOut(RewardBase):
    id: int
    created_by: int

    class Config:
        from_attributes = True
