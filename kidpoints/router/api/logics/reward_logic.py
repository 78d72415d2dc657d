from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.model.rewards import Reward
from kidpoints.model.users import User
from kidpoints.schema.reward_schema import RewardCreate, RewardUpdate

# seeded for every new parent
DEFAULT_REWARDS = [
    {"name": "Video Game: Minecraft", "description": "Popular sandbox game", "points_cost": 250},
    {"name": "Lego Friends Set", "description": "Building blocks set", "points_cost": 150},
    {"name": "Bike Accessory Kit", "description": "Accessories for your bike", "points_cost": 100},
    {"name": "Ice Cream Trip", "description": "Trip to get ice cream", "points_cost": 50},
    {"name": "Extra Tablet Time (1hr)", "description": "One hour of extra tablet time", "points_cost": 30},
    {"name": "Family Movie Night", "description": "Choose a movie for family night", "points_cost": 75},
]


def create_default_rewards(db: Session, parent_id: int) -> None:
    if db.query(Reward).filter(Reward.created_by == parent_id).first():
        return
    db.add_all([Reward(created_by=parent_id, is_global=True, **r) for r in DEFAULT_REWARDS])


def household_id(user: User) -> int:
    """The parent id owning the user's data."""
    return user.id if user.is_parent else user.parent_id


def get_rewards(db: Session, user: User) -> List[Reward]:
    parent_id = household_id(user)
    if parent_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Child does not have a parent"
        )
    return db.query(Reward).filter(Reward.created_by == parent_id).order_by(Reward.id).all()


def get_reward(db: Session, reward_id: int) -> Reward:
    reward = db.query(Reward).filter(Reward.id == reward_id).first()
    if not reward:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reward not found")
    return reward


def _get_own_reward(db: Session, parent: User, reward_id: int, action: str) -> Reward:
    reward = get_reward(db, reward_id)
    if reward.created_by != parent.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You can only {action} your own rewards"
        )
    return reward


def create_reward_logic(db: Session, parent: User, request: RewardCreate) -> Reward:
    reward = Reward(created_by=parent.id, **request.model_dump())
    db.add(reward)
    db.commit()
    db.refresh(reward)
    return reward


def update_reward_logic(db: Session, parent: User, reward_id: int, request: RewardUpdate) -> Reward:
    reward = _get_own_reward(db, parent, reward_id, "edit")
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(reward, field, value)
    db.commit()
    db.refresh(reward)
    return reward


def delete_reward_logic(db: Session, parent: User, reward_id: int) -> None:
    db.delete(_get_own_reward(db, parent, reward_id, "delete"))
    db.commit()
