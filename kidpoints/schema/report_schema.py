from pydantic import BaseModel
from datetime import datetime, date


class RewardReportRow(BaseModel):
    id: int
    child: str
    reward: str
    date: datetime
    status: str


class CountRow(BaseModel):
    name: str
    count: int


class PointsTrendRow(BaseModel):
    date: date
    points: int
