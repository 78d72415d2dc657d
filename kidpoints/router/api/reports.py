from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.report_logic import (
    points_trend_logic, rewards_report_logic, top_badges_logic, top_rules_logic,
)
from kidpoints.router.dependencies import get_current_parent
from kidpoints.schema.report_schema import CountRow, PointsTrendRow, RewardReportRow

router = APIRouter()


@router.get("/reports/rewards", response_model=List[RewardReportRow], status_code=status.HTTP_200_OK)
async def rewards_report(db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return rewards_report_logic(db, parent)


@router.get("/reports/top-rules", response_model=List[CountRow], status_code=status.HTTP_200_OK)
async def top_rules(child: Optional[str] = Query(None), db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return top_rules_logic(db, parent, child)


@router.get("/reports/points-trend", response_model=List[PointsTrendRow], status_code=status.HTTP_200_OK)
async def points_trend(child: Optional[str] = Query(None), db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return points_trend_logic(db, parent, child)


@router.get("/reports/top-badges", response_model=List[CountRow], status_code=status.HTTP_200_OK)
async def top_badges(child: Optional[str] = Query(None), db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return top_badges_logic(db, parent, child)
