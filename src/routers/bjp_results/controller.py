from typing import Any, Dict, List

from sqlalchemy.orm import Session

from src.routers.bjp_results.models import BjpResult


def _to_dict(obj: BjpResult) -> Dict[str, Any]:
    return {
        "id": obj.id,
        "election_year": obj.election_year,
        "election_type": obj.election_type,
        "total_seats": obj.total_seats,
        "seats_contested": obj.seats_contested,
        "seats_won": obj.seats_won,
        "vote_percent": float(obj.vote_percent) if obj.vote_percent is not None else None,
    }


def get_all_results(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(BjpResult).order_by(BjpResult.election_year.asc(), BjpResult.id.asc()).all()
    return [_to_dict(row) for row in rows]


def get_results_by_type(db: Session, election_type: str) -> List[Dict[str, Any]]:
    rows = (
        db.query(BjpResult)
        .filter(BjpResult.election_type == election_type)
        .order_by(BjpResult.election_year.asc(), BjpResult.id.asc())
        .all()
    )
    return [_to_dict(row) for row in rows]


def get_results_by_year(db: Session, year: int) -> List[Dict[str, Any]]:
    rows = (
        db.query(BjpResult)
        .filter(BjpResult.election_year == year)
        .order_by(BjpResult.id.asc())
        .all()
    )
    return [_to_dict(row) for row in rows]
