from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.orm import Session

from . import controller
from src.database import get_db
from src.routers.auth.controller import get_current_user
from src.routers.election_results.utilities import YEAR_COLUMNS
from src.utils.errors import ApiError, InternalFault, NotFoundError, ValidationError
from src.utils.validators import (
    unwrap,
    validate_election_type,
    validate_int_param,
    validate_text_param,
)

router = APIRouter(
    prefix="/api/v1/election-results",
    tags=["Election Results"],
    dependencies=[Depends(get_current_user)],
    responses={404: {"description": "Not found"}},
)


@router.get("/analytics/{position}")
def get_position_wise_analytics(position: str, db: Session = Depends(get_db)):
    """
    Position-wise seat analytics grouped by election type (AC = Assembly, PE = Parliament).
    """
    position = unwrap(validate_text_param(position, "Position"))
    try:
        data = controller.get_position_analytics(db, position)
        if data is None:
            raise NotFoundError(f"No results found for position: {position}")
        return {
            "success": True,
            "message": "Position-wise analytics fetched successfully",
            "data": data,
        }
    except ApiError:
        raise
    except Exception:
        logger.exception("Error fetching position-wise analytics")
        raise InternalFault()


@router.get("/details")
def get_position_details_by_party(
    position: Optional[str] = Query(None),
    party: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    electionType: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Constituency-wise drill-down for one party, year and election type.
    """
    if not all(value and value.strip() for value in (position, party, year, electionType)):
        raise ValidationError("Position, party, year, and electionType are required")

    position_no = unwrap(validate_int_param(position, "Position"))
    party_name = unwrap(validate_text_param(party, "Party"))
    election_type = unwrap(validate_election_type(electionType))
    year_no = unwrap(validate_int_param(year, "Year"))
    if year_no not in YEAR_COLUMNS:
        raise ValidationError(f"Invalid year: {year}")

    try:
        constituencies = controller.get_position_details(db, position_no, party_name, year_no, election_type)
        if not constituencies:
            raise NotFoundError(f"No detailed results found for {party_name} in {year_no}", data=[])
        return {
            "success": True,
            "message": "Detailed position data fetched successfully",
            "data": {
                "position": position_no,
                "party": party_name,
                "year": year_no,
                "electionType": election_type.value,
                "constituencies": constituencies,
            },
        }
    except ApiError:
        raise
    except Exception:
        logger.exception("Error fetching position details by party")
        raise InternalFault()
