from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.child_logic import create_child_logic, get_children, update_child_logic
from kidpoints.router.dependencies import get_current_parent
from kidpoints.schema.user_schema import ChildCreate, ChildUpdate, UserOut

router = APIRouter()


@router.get("/children", response_model=List[UserOut], status_code=status.HTTP_200_OK)
async def list_children(db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return get_children(db, parent.id)


@router.post("/children", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_child(request: ChildCreate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return create_child_logic(db, parent, request)


@router.put("/children/{child_id}", response_model=UserOut, status_code=status.HTTP_200_OK)
async def update_child(child_id: int, request: ChildUpdate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    """Update name, username, age and optionally password / picture of a child."""
    return update_child_logic(db, parent, child_id, request)
