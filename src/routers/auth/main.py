from fastapi import APIRouter, Body, Depends, status
from loguru import logger
from sqlalchemy.orm import Session

from . import controller, schemas
from src.database import get_db
from src.utils.errors import ApiError, InternalFault

# Defining the router
router = APIRouter(
    prefix="/api/v1/auth",
    tags=["Auth"],
    responses={404: {"description": "Not found"}},
)


# ----------------------
# Register
# ----------------------
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: schemas.RegisterSchema = Body(...), db: Session = Depends(get_db)):
    try:
        user = controller.register_user(db, payload.name, payload.code, payload.email)
        return {
            "success": True,
            "message": "User registered successfully",
            "data": {"user": schemas.UserOut.model_validate(user).model_dump(mode="json")},
        }
    except ApiError:
        raise
    except Exception:
        logger.exception("Error in register user")
        db.rollback()
        raise InternalFault()


# ----------------------
# Login
# ----------------------
@router.post("/login")
def login(credentials: schemas.LoginSchema = Body(...), db: Session = Depends(get_db)):
    try:
        token, user = controller.login_with_code(db, credentials.code)
        data = schemas.TokenData(token=token, user=schemas.UserOut.model_validate(user))
        return {
            "success": True,
            "message": "Login Successful",
            "data": data.model_dump(mode="json"),
        }
    except ApiError:
        raise
    except Exception:
        logger.exception("An error occurred during login")
        raise InternalFault("Login failed")
