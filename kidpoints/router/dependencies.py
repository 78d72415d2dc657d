from fastapi import Depends, status, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from kidpoints.config import settings
from kidpoints.database import get_db
from kidpoints.log import get_logger
from kidpoints.model.users import User
from kidpoints.schema.auth_schema import TokenPayload

log = get_logger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_token(token: str = Depends(oauth2_scheme)) -> TokenPayload:
    if not token:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authenticated")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        token_data = TokenPayload(**payload)
    except (JWTError, ValidationError) as e:
        log.info("Rejected token: %s", e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials") from e
    return token_data


def get_current_user(
    db: Session = Depends(get_db), token: TokenPayload = Depends(get_token)
) -> User:
    user = db.query(User).filter(User.id == int(token.sub)).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return user


def get_current_parent(
    current_user: User = Depends(get_current_user),
) -> User:
    if not current_user.is_parent:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Parent access required",
        )
    return current_user


def get_current_child(
    current_user: User = Depends(get_current_user),
) -> User:
    if not current_user.is_child:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Child access required",
        )
    return current_user
