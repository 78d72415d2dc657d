from pydantic import BaseModel, Field
from typing import Optional


class UserOut(BaseModel):
    id: int
    username: str
    name: str
    role: str
    parent_id: Optional[int] = None
    age: Optional[int] = None
    total_points: int = 0
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class ChildCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    age: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None


class ChildUpdate(BaseModel):
    name: str = Field(min_length=1)
    username: str = Field(min_length=1)
    age: int = Field(ge=0)
    password: Optional[str] = None
    image_url: Optional[str] = None
