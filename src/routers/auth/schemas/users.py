from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr


# =============================
# Requests
# =============================
class RegisterSchema(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None
    email: Optional[EmailStr] = None


class LoginSchema(BaseModel):
    code: Optional[str] = None


# =============================
# Responses
# =============================
class UserOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TokenData(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserOut
