from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.badge_logic import (
    allot_badges_logic, create_badge_logic, delete_badge_logic, get_badge_progress_logic,
    get_badges, get_child_badges_logic, update_badge_logic,
)
from kidpoints.router.api.logics.child_logic import ensure_child_access
from kidpoints.router.dependencies import get_current_parent, get_current_user
from kidpoints.schema.badge_schema import (
    AllotResult, Badge, BadgeCreate, BadgeProgressOut, BadgeUpdate, ChildBadgeOut,
)

router = APIRouter()


@router.get("/badges", response_model=List[Badge], status_code=status.HTTP_200_OK)
async def list_badges(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return get_badges(db, user)


@router.post("/badges", response_model=Badge, status_code=status.HTTP_201_CREATED)
async def create_badge(request: BadgeCreate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return create_badge_logic(db, parent, request)


@router.put("/badges/{badge_id}", response_model=Badge, status_code=status.HTTP_200_OK)
async def update_badge(badge_id: int, request: BadgeUpdate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return update_badge_logic(db, parent, badge_id, request)


@router.delete("/badges/{badge_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_badge(badge_id: int, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    delete_badge_logic(db, parent, badge_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/badges/allot", response_model=AllotResult, status_code=status.HTTP_200_OK)
async def allot_badges(db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    """Award every streak badge the parent's children have newly qualified for."""
    return allot_badges_logic(db, parent)


@router.get("/child-badges/{child_id}", response_model=List[ChildBadgeOut], status_code=status.HTTP_200_OK)
async def list_child_badges(child_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    ensure_child_access(db, user, child_id)
    return get_child_badges_logic(db, child_id)


@router.get("/child-badges/{child_id}/progress", response_model=List[BadgeProgressOut], status_code=status.HTTP_200_OK)
async def child_badge_progress(child_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    ensure_child_access(db, user, child_id)
    return get_badge_progress_logic(db, child_id)
