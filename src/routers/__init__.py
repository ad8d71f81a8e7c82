# src/routers/__init__.py
from .auth.main import router as auth_router
from .surname.main import router as surname_router
from .election_results.main import router as election_results_router
from .bjp_results.main import router as bjp_results_router

__all__ = [
    "auth_router",
    "surname_router",
    "election_results_router",
    "bjp_results_router",
]
