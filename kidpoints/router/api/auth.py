from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kidpoints.database import get_db
from kidpoints.model.users import User
from kidpoints.router.api.logics.auth_logic import login_logic, register_parent_logic
from kidpoints.router.dependencies import get_current_user
from kidpoints.schema.auth_schema import LoginRequest, Token, UserRegister
from kidpoints.schema.user_schema import UserOut

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(request: UserRegister, db: Session = Depends(get_db)):
    """Register a parent account. The new parent gets the default reward catalog."""
    return register_parent_logic(db, request)


@router.post("/login", response_model=Token, status_code=status.HTTP_200_OK)
async def login(request: LoginRequest, db: Session = Depends(get_db)):
    """Login endpoint shared by parents and children

    Args:
        request (LoginRequest): username and password
        db (Session): Database session

    Raises:
        HTTPException: When user not found or credentials are incorrect

    Returns:
        Token: Access token for successful authentication
    """
    return login_logic(db, request)


@router.get("/user", response_model=UserOut, status_code=status.HTTP_200_OK)
async def get_me(user: User = Depends(get_current_user)):
    return user
