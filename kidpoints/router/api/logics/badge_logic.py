from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload
from typing import List

from kidpoints.model.activities import Activity
from kidpoints.model.badges import Badge
from kidpoints.model.child_badges import ChildBadge
from kidpoints.model.users import User
from kidpoints.router.api.logics.reward_logic import household_id
from kidpoints.router.background.badges_task import allot_badges_for_parent
from kidpoints.router.background.streak_task import badge_progress
from kidpoints.schema.badge_schema import (
    AllotResult, AwardOut, BadgeCreate, BadgeProgressOut, BadgeUpdate,
)
from kidpoints.schema.streaks_schema import ActivityRecord, BadgeRecord


def get_badges(db: Session, user: User) -> List[Badge]:
    parent_id = household_id(user)
    if parent_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Child does not have a parent"
        )
    return db.query(Badge).filter(Badge.parent_id == parent_id).order_by(Badge.id).all()


def _get_own_badge(db: Session, parent: User, badge_id: int) -> Badge:
    badge = db.query(Badge).filter(Badge.id == badge_id, Badge.parent_id == parent.id).first()
    if not badge:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Badge not found")
    return badge


def create_badge_logic(db: Session, parent: User, request: BadgeCreate) -> Badge:
    badge = Badge(parent_id=parent.id, **request.model_dump())
    db.add(badge)
    db.commit()
    db.refresh(badge)
    return badge


def update_badge_logic(db: Session, parent: User, badge_id: int, request: BadgeUpdate) -> Badge:
    badge = _get_own_badge(db, parent, badge_id)
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(badge, field, value)
    db.commit()
    db.refresh(badge)
    return badge


def delete_badge_logic(db: Session, parent: User, badge_id: int) -> None:
    db.delete(_get_own_badge(db, parent, badge_id))
    db.commit()


def allot_badges_logic(db: Session, parent: User) -> AllotResult:
    inserted = allot_badges_for_parent(db, parent.id)
    return AllotResult(
        message="Badges allotted successfully",
        awarded=[AwardOut(child_id=cb.child_id, badge_id=cb.badge_id) for cb in inserted],
    )


def get_child_badges_logic(db: Session, child_id: int) -> List[ChildBadge]:
    return (
        db.query(ChildBadge)
        .options(joinedload(ChildBadge.badge))
        .filter(ChildBadge.child_id == child_id)
        .order_by(ChildBadge.date_earned, ChildBadge.id)
        .all()
    )


def get_badge_progress_logic(db: Session, child_id: int) -> List[BadgeProgressOut]:
    """Every badge of the child's household with the child's streak for it."""
    child = db.query(User).filter(User.id == child_id).first()
    if not child or not child.is_child:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Child not found")

    badges = [BadgeRecord.model_validate(b) for b in get_badges(db, child)]
    activities = [
        ActivityRecord.model_validate(a)
        for a in db.query(Activity).filter(Activity.child_id == child_id).all()
    ]
    earned = {cb.badge_id for cb in get_child_badges_logic(db, child_id)}
    return [
        BadgeProgressOut(
            badge_id=badge.id,
            name=badge.name,
            activity_type=badge.activity_type,
            required_days=badge.required_days,
            streak=streak,
            earned=badge.id in earned,
        )
        for badge, streak in badge_progress(activities, badges)
    ]
