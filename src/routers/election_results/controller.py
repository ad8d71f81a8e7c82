from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.routers.election_results.models import AssemblyPaper, ElectionResult
from src.routers.election_results.utilities import (
    PARTY_POSITION_TABLES,
    YEAR_COLUMNS,
    pivot_by_party,
    row_to_dict,
)
from src.utils.validators import ElectionType


def get_position_analytics(db: Session, position: str) -> Optional[Dict[str, Any]]:
    """
    Seat series per party for one position, split into assembly (AC) and
    parliament (PE) elections. Returns None when the position has no rows.
    """
    results: List[ElectionResult] = (
        db.query(ElectionResult)
        .filter(ElectionResult.position == position)
        .order_by(ElectionResult.electionyear.asc(), ElectionResult.electionname.asc())
        .all()
    )
    if not results:
        return None

    assembly_results = [r for r in results if (r.electionname or "").upper() == ElectionType.AC.value]
    parliament_results = [r for r in results if (r.electionname or "").upper() == ElectionType.PE.value]

    return {
        "position": position.upper(),
        "assembly": pivot_by_party(assembly_results),
        "parliament": pivot_by_party(parliament_results),
        "years": sorted({r.electionyear for r in results}),
    }


def get_position_details(db: Session, position: int, party: str, year: int, election_type: ElectionType) -> List[Dict[str, Any]]:
    """
    Constituencies where ``party`` held ``position`` in ``year``. The year
    column and the table both come from closed lookups; unknown years raise
    KeyError and are rejected by the router beforehand.
    """
    model = PARTY_POSITION_TABLES[election_type]
    year_column = getattr(model, YEAR_COLUMNS[year])

    rows = (
        db.query(model, AssemblyPaper.assembly_id, AssemblyPaper.assembly_name)
        .outerjoin(AssemblyPaper, model.ac_no == AssemblyPaper.assembly_id)
        .filter(model.position == position)
        .filter(func.upper(year_column) == party.upper())
        .order_by(model.ac_no.asc(), model.id.asc())
        .all()
    )
    constituencies = []
    for record, assembly_id, assembly_name in rows:
        item = row_to_dict(record)
        item["assembly_id"] = assembly_id
        item["assembly_name"] = assembly_name
        constituencies.append(item)
    return constituencies
