from .config import (
    APPNAME,
    VERSION,
    SECRET_KEY,
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_DAYS,
    DATABASE_URL,
    LOG_LEVEL,
    HOST,
    PORT,
    CORS_ORIGINS,
)

__all__ = [
    "APPNAME",
    "VERSION",
    "SECRET_KEY",
    "ALGORITHM",
    "ACCESS_TOKEN_EXPIRE_DAYS",
    "DATABASE_URL",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "CORS_ORIGINS",
]
