from fastapi import HTTPException, status
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload
from typing import List

from kidpoints.model.redemption_requests import RedemptionRequest, RedemptionStatus
from kidpoints.model.users import User
from kidpoints.router.api.logics.child_logic import get_children
from kidpoints.router.api.logics.reward_logic import get_reward
from kidpoints.schema.redemption_schema import RedemptionRequestCreate


def get_requests_for_children(db: Session, child_ids: List[int]) -> List[RedemptionRequest]:
    if not child_ids:
        return []
    return (
        db.query(RedemptionRequest)
        .options(joinedload(RedemptionRequest.reward), joinedload(RedemptionRequest.child))
        .filter(RedemptionRequest.child_id.in_(child_ids))
        .order_by(desc(RedemptionRequest.request_date), desc(RedemptionRequest.id))
        .all()
    )


def get_requests_logic(db: Session, user: User) -> List[RedemptionRequest]:
    """Parents see the requests of all their children, children their own."""
    if user.is_parent:
        child_ids = [c.id for c in get_children(db, user.id)]
    else:
        child_ids = [user.id]
    return get_requests_for_children(db, child_ids)


def create_request_logic(db: Session, child: User, request: RedemptionRequestCreate) -> RedemptionRequest:
    """A child asks to redeem a reward of its own household.

    Raises:
        HTTPException: 404 unknown reward, 400 not enough points
    """
    reward = get_reward(db, request.reward_id)
    if reward.created_by != child.parent_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reward not found")
    if (child.total_points or 0) < reward.points_cost:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Not enough points")

    redemption = RedemptionRequest(
        child_id=child.id,
        reward_id=reward.id,
        status=RedemptionStatus.PENDING.value,
        note=request.note,
    )
    db.add(redemption)
    db.commit()
    db.refresh(redemption)
    return redemption


def update_request_status_logic(db: Session, parent: User, request_id: int, new_status: str) -> RedemptionRequest:
    """Approve or reject a request.

    The reward cost leaves the child's balance (floored at zero) the first time
    the request becomes approved.
    """
    if new_status not in (RedemptionStatus.APPROVED.value, RedemptionStatus.REJECTED.value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")

    redemption = db.query(RedemptionRequest).filter(RedemptionRequest.id == request_id).first()
    if not redemption:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    child = redemption.child
    if child.parent_id != parent.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You don't have access to this request"
        )

    was_approved = redemption.status == RedemptionStatus.APPROVED.value
    redemption.status = new_status
    if not was_approved and new_status == RedemptionStatus.APPROVED.value:
        child.total_points = max(0, (child.total_points or 0) - redemption.reward.points_cost)
    db.commit()
    db.refresh(redemption)
    return redemption
