import re
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import get_db
from src.routers.auth import models
from src.utils.errors import AuthenticationError, ValidationError
from src.utils.jwt import create_access_token, get_user_id_from_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

_CODE = re.compile(r"[0-9]{4}")


def register_user(db: Session, name: Optional[str], code: Optional[str], email: Optional[str]) -> models.User:
    name = (name or "").strip()
    code = (code or "").strip()
    if not name or not code:
        raise ValidationError("Name and code are required")
    if not _CODE.fullmatch(code):
        raise ValidationError("Code must be exactly 4 digits")

    existing = db.query(models.User).filter(models.User.code == code).first()
    if existing:
        raise ValidationError("User with this code already exists")

    user = models.User(name=name, code=code, email=email)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # code taken by a concurrent registration after the check above
        db.rollback()
        logger.warning(f"DB IntegrityError on register_user: {e}")
        raise ValidationError("User with this code already exists")
    db.refresh(user)
    logger.info(f"Registered user id={user.id}")
    return user


def login_with_code(db: Session, code: Optional[str]):
    """Return ``(token, user)`` for a valid 4-digit access code."""
    code = (code or "").strip()
    if len(code) != 4:
        raise ValidationError("A 4-digit code is required")

    user = db.query(models.User).filter(models.User.code == code).first()
    if not user:
        logger.warning("Login failed: unknown code")
        raise AuthenticationError("User not found")

    token = create_access_token(data={"sub": str(user.id)})
    logger.info(f"User id={user.id} logged in")
    return token, user


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> models.User:
    """Bearer gate shared by every data router."""
    user_id = get_user_id_from_token(token)
    user = db.query(models.User).filter(models.User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
