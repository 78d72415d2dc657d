from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.reward_logic import (
    create_reward_logic, delete_reward_logic, get_rewards, update_reward_logic,
)
from kidpoints.router.dependencies import get_current_parent, get_current_user
from kidpoints.schema.reward_schema import RewardCreate, RewardOut, RewardUpdate

router = APIRouter()


@router.get("/rewards", response_model=List[RewardOut], status_code=status.HTTP_200_OK)
async def list_rewards(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """Rewards of the household: the parent's own catalog, also shown to its children."""
    return get_rewards(db, user)


@router.post("/rewards", response_model=RewardOut, status_code=status.HTTP_201_CREATED)
async def create_reward(request: RewardCreate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return create_reward_logic(db, parent, request)


@router.put("/rewards/{reward_id}", response_model=RewardOut, status_code=status.HTTP_200_OK)
async def update_reward(reward_id: int, request: RewardUpdate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    return update_reward_logic(db, parent, reward_id, request)


@router.delete("/rewards/{reward_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reward(reward_id: int, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    delete_reward_logic(db, parent, reward_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
