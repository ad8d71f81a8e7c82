from .users import RegisterSchema, LoginSchema, UserOut, TokenData

__all__ = ["RegisterSchema", "LoginSchema", "UserOut", "TokenData"]
