from datetime import datetime
from fastapi import HTTPException, status
from sqlalchemy import desc
from sqlalchemy.orm import Session
from typing import List

from kidpoints.model.activities import Activity
from kidpoints.model.users import User
from kidpoints.router.api.logics.child_logic import get_children
from kidpoints.schema.activity_schema import ActivityCreate


def get_activities(db: Session, child_id: int) -> List[Activity]:
    return db.query(Activity).filter(Activity.child_id == child_id).order_by(desc(Activity.date), desc(Activity.id)).all()


def create_activity_logic(db: Session, parent: User, request: ActivityCreate) -> Activity:
    """Log an activity for a child and add its points to the child's total."""
    child = next((c for c in get_children(db, parent.id) if c.id == request.child_id), None)
    if child is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have access to this child"
        )

    activity = Activity(
        child_id=child.id,
        description=request.description,
        points=request.points,
        date=request.date or datetime.now(),
    )
    db.add(activity)
    child.total_points = (child.total_points or 0) + request.points
    db.commit()
    db.refresh(activity)
    return activity


def delete_activity_logic(db: Session, parent: User, activity_id: int) -> None:
    """Remove an activity and take its points back, never below zero."""
    activity = db.query(Activity).filter(Activity.id == activity_id).first()
    if not activity:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    child = activity.child
    if child.parent_id != parent.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have access to this child"
        )

    child.total_points = max(0, (child.total_points or 0) - activity.points)
    db.delete(activity)
    db.commit()
