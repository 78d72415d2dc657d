from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from kidpoints.auth_util import get_password_hash
from kidpoints.model.users import User
from kidpoints.schema.user_schema import ChildCreate, ChildUpdate


def get_children(db: Session, parent_id: int) -> List[User]:
    return db.query(User).filter(User.parent_id == parent_id, User.role == "child").order_by(User.id).all()


def ensure_child_access(db: Session, user: User, child_id: int) -> None:
    """Parents may see their own children; a child may only see itself.

    Raises:
        HTTPException: 403 otherwise
    """
    if user.is_parent:
        if not any(c.id == child_id for c in get_children(db, user.id)):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You don't have access to this child"
            )
    elif user.id != child_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only view your own records"
        )


def create_child_logic(db: Session, parent: User, request: ChildCreate) -> User:
    if db.query(User).filter(User.username == request.username).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )
    child = User(
        username=request.username,
        hashed_password=get_password_hash(request.password),
        name=request.name,
        role="child",
        parent_id=parent.id,
        age=request.age,
        total_points=0,
        image_url=request.image_url,
    )
    db.add(child)
    db.commit()
    db.refresh(child)
    return child


def update_child_logic(db: Session, parent: User, child_id: int, request: ChildUpdate) -> User:
    """Update a child account of the current parent.

    Raises:
        HTTPException: 404 when not a child, 403 when the child belongs to
            another parent, 400 when the new username is taken
    """
    child = db.query(User).filter(User.id == child_id).first()
    if not child or not child.is_child:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Child not found")
    if child.parent_id != parent.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    if request.username != child.username:
        if db.query(User).filter(User.username == request.username).first():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already taken"
            )

    child.name = request.name
    child.age = request.age
    child.username = request.username
    if request.password:
        child.hashed_password = get_password_hash(request.password)
    if request.image_url:
        child.image_url = request.image_url
    db.commit()
    db.refresh(child)
    return child
