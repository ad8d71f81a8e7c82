from typing import Any, Dict, Iterable, List, Tuple

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from src.routers.surname.models import Assembly, SurnameCount
from src.routers.surname.utilities import (
    AssemblyFilter,
    Dimension,
    shape_combined,
    shape_separate,
)


def _non_empty(column):
    return (column.isnot(None), column != "")


def get_assemblies(db: Session) -> List[Assembly]:
    return (
        db.query(Assembly)
        .order_by(Assembly.assembly_name.asc(), Assembly.assembly_id.asc())
        .all()
    )


def get_assembly_details(db: Session, assembly_numbers: Iterable[int]) -> Dict[int, Dict[str, Any]]:
    """Bulk lookup of ``{assembly_id: {id, assembly_id, assembly_name}}``."""
    numbers = list(set(assembly_numbers))
    if not numbers:
        return {}
    rows = (
        db.query(Assembly.id, Assembly.assembly_id, Assembly.assembly_name)
        .filter(Assembly.assembly_id.in_(numbers))
        .all()
    )
    return {
        row.assembly_id: {"id": row.id, "assembly_id": row.assembly_id, "assembly_name": row.assembly_name}
        for row in rows
    }


def search_surnames(db: Session, assembly_filter: AssemblyFilter, page: int, limit: int) -> Tuple[int, List[SurnameCount]]:
    """Page of raw surname rows, highest count first."""
    query = assembly_filter.apply(db.query(SurnameCount), SurnameCount.assembly_no)
    total = query.count()
    rows = (
        query.order_by(SurnameCount.count_num.desc(), SurnameCount.id.asc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return total, rows


# ---------------------------
# Grouped aggregation with child breadth
# ---------------------------
def aggregate_separate(db: Session, dimension: Dimension, assembly_filter: AssemblyFilter) -> List[Dict[str, Any]]:
    total_count = func.sum(SurnameCount.count_num).label("total_count")
    query = (
        db.query(
            dimension.column,
            SurnameCount.assembly_no,
            total_count,
            func.count(distinct(dimension.child_column)).label("total_child"),
        )
        .filter(*_non_empty(dimension.column))
    )
    rows = (
        assembly_filter.apply(query, SurnameCount.assembly_no)
        .group_by(SurnameCount.assembly_no, dimension.column)
        .order_by(SurnameCount.assembly_no.asc(), total_count.desc(), dimension.column.asc())
        .all()
    )
    assemblies = get_assembly_details(db, (row.assembly_no for row in rows))
    return shape_separate(rows, assemblies, dimension)


def aggregate_combined(db: Session, dimension: Dimension, assembly_filter: AssemblyFilter) -> Dict[str, Any]:
    total_count = func.sum(SurnameCount.count_num).label("total_count")
    query = (
        db.query(
            dimension.column,
            total_count,
            func.count(distinct(dimension.child_column)).label("total_child"),
        )
        .filter(*_non_empty(dimension.column))
    )
    rows = (
        assembly_filter.apply(query, SurnameCount.assembly_no)
        .group_by(dimension.column)
        .order_by(total_count.desc(), dimension.column.asc())
        .all()
    )
    return shape_combined(rows, dimension)


def get_dimension_stats(db: Session, dimension: Dimension, assembly_filter: AssemblyFilter, view_mode: str):
    """
    Combined view only applies when the filter can cover several assemblies
    ("all" or a list); a combined request for one explicit id falls back to
    the separate view, unwrapped to a single object.
    """
    if view_mode == "combined" and assembly_filter.combinable:
        return aggregate_combined(db, dimension, assembly_filter)

    result = aggregate_separate(db, dimension, assembly_filter)
    if assembly_filter.single:
        return result[0] if result else {"assembly": None, "stats": []}
    return result


def get_child_breakdown(db: Session, dimension: Dimension, value: str, assembly_filter: AssemblyFilter) -> List[Dict[str, Any]]:
    """Castes inside one category, or similar-groups inside one caste."""
    count = func.sum(SurnameCount.count_num).label("count")
    query = (
        db.query(dimension.child_column, count)
        .filter(dimension.column == value)
        .filter(*_non_empty(dimension.child_column))
    )
    rows = (
        assembly_filter.apply(query, SurnameCount.assembly_no)
        .group_by(dimension.child_column)
        .order_by(count.desc(), dimension.child_column.asc())
        .all()
    )
    return [{dimension.child_label_key: name, "count": int(total or 0)} for name, total in rows]


# ---------------------------
# In-area search
# ---------------------------
def get_dimension_totals(db: Session, dimension: Dimension) -> List[Dict[str, Any]]:
    total_count = func.sum(SurnameCount.count_num).label("total_count")
    rows = (
        db.query(dimension.column, total_count)
        .filter(*_non_empty(dimension.column))
        .group_by(dimension.column)
        .order_by(total_count.desc(), dimension.column.asc())
        .all()
    )
    return [{dimension.label_key: name, "total_count": int(total or 0)} for name, total in rows]


def get_assembly_breakdown(db: Session, dimension: Dimension, value: str) -> Tuple[int, List[Dict[str, Any]]]:
    """Per-assembly totals for one caste/category; assemblies without metadata are dropped by the inner join."""
    total_count = func.sum(SurnameCount.count_num).label("total_count")
    rows = (
        db.query(Assembly.assembly_id, Assembly.assembly_name, total_count)
        .select_from(SurnameCount)
        .join(Assembly, SurnameCount.assembly_no == Assembly.assembly_id)
        .filter(dimension.column == value)
        .group_by(Assembly.assembly_id, Assembly.assembly_name)
        .order_by(total_count.desc(), Assembly.assembly_id.asc())
        .all()
    )
    data = [
        {"assembly_id": assembly_id, "assembly_name": assembly_name, "count": int(total or 0)}
        for assembly_id, assembly_name, total in rows
    ]
    return sum(item["count"] for item in data), data
