from pydantic import BaseModel, Field
from typing import Optional


class RuleBase(BaseModel):
    name: str = Field(min_length=1)
    description: str
    points: int


class RuleCreate(RuleBase):
    pass


class RuleUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    points: Optional[int] = None


class RuleOut(RuleBase):
    id: int
    parent_id: int

    class Config:
        from_attributes = True
