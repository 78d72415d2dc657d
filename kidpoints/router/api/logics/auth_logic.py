from datetime import timedelta
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import Dict

from kidpoints.auth_util import verify_password, create_access_token, get_password_hash
from kidpoints.config import settings
from kidpoints.log import get_logger
from kidpoints.model.users import User
from kidpoints.router.api.logics.reward_logic import create_default_rewards
from kidpoints.schema.auth_schema import LoginRequest, UserRegister

log = get_logger(__name__)


def username_taken(db: Session, username: str) -> bool:
    return db.query(User).filter(User.username == username).first() is not None


def register_parent_logic(db: Session, request: UserRegister) -> User:
    """Register a new parent account and seed its reward catalog.

    Raises:
        HTTPException: 400 when the username is already taken
    """
    if username_taken(db, request.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    parent = User(
        username=request.username,
        hashed_password=get_password_hash(request.password),
        name=request.name,
        role="parent",
        total_points=0,
    )
    db.add(parent)
    db.flush()
    create_default_rewards(db, parent.id)
    db.commit()
    db.refresh(parent)
    log.info("Registered parent %s", parent.id)
    return parent


def login_logic(db: Session, request: LoginRequest) -> Dict[str, str]:
    """Login for parents and children alike.

    Raises:
        HTTPException: When the user is not found or the password is wrong

    Returns:
        Dict[str, str]: Access token and token type
    """
    user = db.query(User).filter(User.username == request.username).first()
    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials."
        )

    access_token = create_access_token(
        subject=user.id,
        role=user.role,
        name=user.name,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return {"access_token": access_token, "token_type": "bearer"}
