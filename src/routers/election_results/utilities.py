# utilities.py
from typing import Any, Dict, List, Optional

from src.routers.election_results.models import PartyPositionAC, PartyPositionPE
from src.utils.validators import ElectionType

# Party label, seat column on ElectionResult, chart color
PARTIES = [
    ("BJP", "bjp_seat", "#FF8C00"),
    ("INC", "inc_seat", "#228B22"),
    ("BSP", "bsp_seat", "#4169E1"),
    ("JCCJ", "jccj_seat", "#FF1493"),
    ("GGP", "ggp_seat", "#9C27B0"),
    ("CPI", "cpi_seat", "#F44336"),
    ("AAP", "aap_seat", "#00BCD4"),
    ("OTHER", "other_seat", "#696969"),
]

YEAR_COLUMNS = {
    2008: "ele_ae_2008",
    2009: "ele_pe_2009",
    2013: "ele_ae_2013",
    2014: "ele_pe_2014",
    2018: "ele_ae_2018",
    2019: "ele_pe_2019",
}

PARTY_POSITION_TABLES = {
    ElectionType.AC: PartyPositionAC,
    ElectionType.PE: PartyPositionPE,
}


def _seat_value(value: Any) -> Optional[int]:
    # zero and missing both mean "no seats recorded"
    return int(value) if value else None


def pivot_by_party(results: List[Any]) -> List[Dict[str, Any]]:
    """One ``{party, color, series}`` entry per tracked party, series in row order."""
    return [
        {
            "party": party,
            "color": color,
            "series": [
                {"year": result.electionyear, "value": _seat_value(getattr(result, key))}
                for result in results
            ],
        }
        for party, key, color in PARTIES
    ]


def row_to_dict(row: Any) -> Dict[str, Any]:
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}
