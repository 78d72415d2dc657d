from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.activity_logic import create_activity_logic, delete_activity_logic, get_activities
from kidpoints.router.api.logics.child_logic import ensure_child_access
from kidpoints.router.dependencies import get_current_parent, get_current_user
from kidpoints.schema.activity_schema import ActivityCreate, ActivityOut

router = APIRouter()


@router.get("/activities/{child_id}", response_model=List[ActivityOut], status_code=status.HTTP_200_OK)
async def list_activities(child_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """Activities of a child, newest first."""
    ensure_child_access(db, user, child_id)
    return get_activities(db, child_id)


@router.post("/activities", response_model=ActivityOut, status_code=status.HTTP_201_CREATED)
async def create_activity(request: ActivityCreate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return create_activity_logic(db, parent, request)


@router.delete("/activities/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(activity_id: int, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    delete_activity_logic(db, parent, activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
