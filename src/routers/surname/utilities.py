# utilities.py
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from src.routers.surname.models import SurnameCount
from src.utils.errors import InvalidAssemblyFilter

COMBINED_ASSEMBLY = {
    "id": 0,
    "assembly_id": 0,
    "assembly_name": "All Assemblies Combined",
}


# ----------------------
# Dimensions
# ----------------------
@dataclass(frozen=True, eq=False)
class Dimension:
    """A grouping column of the surname table and the child column counted for breadth."""

    name: str
    column: Any
    child_column: Any
    child_key: str
    label_key: str
    child_label_key: str

    @property
    def key(self) -> str:
        return self.column.key

    def stat(self, value: str, total_count: Any, total_child: Any) -> Dict[str, Any]:
        return {
            self.key: value,
            "total_count": int(total_count or 0),
            self.child_key: int(total_child or 0),
        }


CATEGORY = Dimension(
    name="category",
    column=SurnameCount.surname_category,
    child_column=SurnameCount.surname_caste,
    child_key="total_cast",
    label_key="category_name",
    child_label_key="caste_name",
)
CASTE = Dimension(
    name="caste",
    column=SurnameCount.surname_caste,
    child_column=SurnameCount.surname_similar,
    child_key="total_similar",
    label_key="caste_name",
    child_label_key="surname_similar",
)
SURNAME_SIMILAR = Dimension(
    name="surname_similar",
    column=SurnameCount.surname_similar,
    child_column=SurnameCount.surname,
    child_key="total_surname",
    label_key="surname_similar",
    child_label_key="surname",
)


# ----------------------
# Assembly filter
# ----------------------
class FilterKind(enum.Enum):
    ANY = "any"          # parameter absent
    ALL = "all"          # the "all" sentinel
    EQUALS = "equals"
    MEMBER = "member"


@dataclass(frozen=True)
class AssemblyFilter:
    kind: FilterKind = FilterKind.ANY
    ids: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def combinable(self) -> bool:
        """True when the filter can denote more than one assembly."""
        return self.kind in (FilterKind.ALL, FilterKind.MEMBER)

    @property
    def single(self) -> bool:
        return self.kind is FilterKind.EQUALS

    def apply(self, query, column):
        if self.kind is FilterKind.EQUALS:
            return query.filter(column == self.ids[0])
        if self.kind is FilterKind.MEMBER:
            return query.filter(column.in_(self.ids))
        return query


def _parse_assembly_token(token: str) -> int:
    token = token.strip()
    if not token.isascii() or not token.isdigit():
        raise InvalidAssemblyFilter(f"Invalid assembly ID format: {token!r}")
    return int(token)


def build_assembly_filter(assembly_id: Optional[str]) -> AssemblyFilter:
    """Turn a validated assembly_id ("all", "7", "1,2,3" or None) into a filter."""
    if not assembly_id:
        return AssemblyFilter(FilterKind.ANY)
    if assembly_id == "all":
        return AssemblyFilter(FilterKind.ALL)
    if "," in assembly_id:
        ids = tuple(_parse_assembly_token(token) for token in assembly_id.split(","))
        return AssemblyFilter(FilterKind.MEMBER, ids)
    return AssemblyFilter(FilterKind.EQUALS, (_parse_assembly_token(assembly_id),))


# ----------------------
# Result shapers
# ----------------------
def shape_separate(rows: Iterable[Any], assemblies: Dict[int, Dict[str, Any]], dimension: Dimension) -> List[Dict[str, Any]]:
    """
    Group ``(value, assembly_no, total_count, total_child)`` rows per assembly,
    keeping row order both across and within assemblies.
    """
    by_assembly: Dict[int, Dict[str, Any]] = {}
    for value, assembly_no, total_count, total_child in rows:
        entry = by_assembly.setdefault(
            assembly_no,
            {"assembly": assemblies.get(assembly_no), "stats": []},
        )
        entry["stats"].append(dimension.stat(value, total_count, total_child))
    return list(by_assembly.values())


def shape_combined(rows: Iterable[Any], dimension: Dimension) -> Dict[str, Any]:
    stats = [dimension.stat(value, total_count, total_child) for value, total_count, total_child in rows]
    # Stable sort keeps the value-ascending tie-break from the query
    stats.sort(key=lambda item: item["total_count"], reverse=True)
    return {
        "assembly": dict(COMBINED_ASSEMBLY),
        "stats": stats,
        "isCombined": True,
    }
