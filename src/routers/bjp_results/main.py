from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.orm import Session

from . import controller
from src.database import get_db
from src.routers.auth.controller import get_current_user
from src.utils.errors import ApiError, InternalFault, NotFoundError
from src.utils.validators import unwrap, validate_int_param, validate_text_param

router = APIRouter(
    prefix="/api/v1/bjp-results",
    tags=["BJP Results"],
    dependencies=[Depends(get_current_user)],
    responses={404: {"description": "Not found"}},
)


def _respond(results, not_found_message: str):
    if not results:
        raise NotFoundError(not_found_message, data=[])
    return {
        "success": True,
        "message": "BJP results fetched successfully",
        "data": results,
    }


@router.get("/all")
def get_all_bjp_results(db: Session = Depends(get_db)):
    try:
        return _respond(controller.get_all_results(db), "No BJP results found")
    except ApiError:
        raise
    except Exception:
        logger.exception("Error fetching BJP results")
        raise InternalFault()


@router.get("/type/{election_type}")
def get_bjp_results_by_type(election_type: str, db: Session = Depends(get_db)):
    """Results for one election type (Assembly/Parliament)."""
    election_type = unwrap(validate_text_param(election_type, "Election type"))
    try:
        return _respond(
            controller.get_results_by_type(db, election_type),
            f"No results found for election type: {election_type}",
        )
    except ApiError:
        raise
    except Exception:
        logger.exception("Error fetching BJP results by type")
        raise InternalFault()


@router.get("/year/{year}")
def get_bjp_results_by_year(year: str, db: Session = Depends(get_db)):
    year_no = unwrap(validate_int_param(year, "Year"))
    try:
        return _respond(controller.get_results_by_year(db, year_no), f"No results found for year: {year_no}")
    except ApiError:
        raise
    except Exception:
        logger.exception("Error fetching BJP results by year")
        raise InternalFault()
