from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.redemption_logic import (
    create_request_logic, get_requests_logic, update_request_status_logic,
)
from kidpoints.router.dependencies import get_current_child, get_current_parent, get_current_user
from kidpoints.schema.redemption_schema import (
    RedemptionRequestCreate, RedemptionRequestOut, RedemptionStatusUpdate,
)

router = APIRouter()


@router.get("/redemption-requests", response_model=List[RedemptionRequestOut], status_code=status.HTTP_200_OK)
async def list_requests(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return get_requests_logic(db, user)


@router.post("/redemption-requests", response_model=RedemptionRequestOut, status_code=status.HTTP_201_CREATED)
async def create_request(request: RedemptionRequestCreate, db: Session = Depends(get_db), child: User = Depends(get_current_child)):
    """A child asks to redeem a reward; needs at least the reward cost in points."""
    return create_request_logic(db, child, request)


@router.put("/redemption-requests/{request_id}", response_model=RedemptionRequestOut, status_code=status.HTTP_200_OK)
async def update_request(request_id: int, request: RedemptionStatusUpdate, db: Session = Depends(get_db), parent: User = Depends(get_current_parent)):
    """Approve or reject a redemption request

    Args:
        request_id (int): the redemption request
        request (RedemptionStatusUpdate): "approved" or "rejected"

    Raises:
        HTTPException: 400 invalid status, 404 unknown request, 403 another household

    Returns:
        RedemptionRequestOut: the updated request
    """
    return update_request_status_logic(db, parent, request_id, request.status)
