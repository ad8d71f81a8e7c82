import math
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query
from loguru import logger
from sqlalchemy.orm import Session

from . import controller, schemas
from src.database import get_db
from src.routers.auth.controller import get_current_user
from src.routers.surname.utilities import (
    CASTE,
    CATEGORY,
    SURNAME_SIMILAR,
    Dimension,
    build_assembly_filter,
)
from src.utils.errors import ApiError, InternalFault, InvalidAssemblyFilter, ValidationError
from src.utils.validators import (
    unwrap,
    validate_assembly_id,
    validate_pagination,
    validate_text_param,
    validate_view_mode,
)

router = APIRouter(
    prefix="/api/v1/surname",
    tags=["Surname"],
    dependencies=[Depends(get_current_user)],
    responses={404: {"description": "Not found"}},
)


def _assembly_filter(assembly_id):
    value = unwrap(validate_assembly_id(assembly_id))
    try:
        return build_assembly_filter(value)
    except InvalidAssemblyFilter as e:
        logger.warning(f"Assembly filter rejected after validation: {e}")
        raise ValidationError("Invalid assembly ID format")


@router.get("/assemblies")
def get_assemblies(db: Session = Depends(get_db)):
    try:
        assemblies = controller.get_assemblies(db)
        return {
            "success": True,
            "data": [schemas.AssemblyOut.model_validate(a).model_dump() for a in assemblies],
        }
    except Exception:
        logger.exception("Error fetching assemblies")
        raise InternalFault()


@router.post("/search")
def search_surnames(payload: Optional[schemas.SearchRequest] = Body(None), db: Session = Depends(get_db)):
    """
    Raw surname rows for the selected assembly, highest count first.
    """
    payload = payload or schemas.SearchRequest()
    try:
        assembly_filter = _assembly_filter(payload.assembly_id)
        page, limit = unwrap(validate_pagination(payload.page, payload.limit))

        total, rows = controller.search_surnames(db, assembly_filter, page, limit)
        return {
            "success": True,
            "count": total,
            "totalPages": math.ceil(total / limit),
            "currentPage": page,
            "data": [schemas.SurnameRowOut.model_validate(row).model_dump() for row in rows],
        }
    except ApiError:
        raise
    except Exception:
        logger.exception("Error searching surnames")
        raise InternalFault()


def _dimension_stats(db: Session, dimension: Dimension, assembly_id, view_mode):
    assembly_filter = _assembly_filter(assembly_id)
    mode = unwrap(validate_view_mode(view_mode))
    try:
        return controller.get_dimension_stats(db, dimension, assembly_filter, mode)
    except Exception:
        logger.exception(f"Error fetching {dimension.name} statistics")
        raise InternalFault(f"Failed to fetch {dimension.name} statistics")


@router.get("/category")
def get_category_stats(
    assembly_id: Optional[str] = Query(None, description='"all", one id, or comma-separated ids'),
    view_mode: Optional[str] = Query(None, description='"separate" (default) or "combined"'),
    db: Session = Depends(get_db),
):
    return _dimension_stats(db, CATEGORY, assembly_id, view_mode)


@router.get("/caste")
def get_caste_stats(
    assembly_id: Optional[str] = Query(None),
    view_mode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return _dimension_stats(db, CASTE, assembly_id, view_mode)


@router.get("/surname-similar")
def get_surname_similar_stats(
    assembly_id: Optional[str] = Query(None),
    view_mode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return _dimension_stats(db, SURNAME_SIMILAR, assembly_id, view_mode)


@router.get("/caste-details")
def get_caste_details_by_category(
    category: Optional[str] = Query(None),
    assembly_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    category = unwrap(validate_text_param(category, "Category"))
    assembly_filter = _assembly_filter(assembly_id)
    try:
        castes = controller.get_child_breakdown(db, CATEGORY, category, assembly_filter)
    except Exception:
        logger.exception("Error fetching caste details")
        raise InternalFault("Failed to fetch caste details")
    return {
        "category": category,
        "total_castes": len(castes),
        "castes": castes,
    }


@router.get("/surname-details")
def get_surname_details_by_caste(
    caste: Optional[str] = Query(None),
    assembly_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    caste = unwrap(validate_text_param(caste, "Caste"))
    assembly_filter = _assembly_filter(assembly_id)
    try:
        surnames = controller.get_child_breakdown(db, CASTE, caste, assembly_filter)
    except Exception:
        logger.exception("Error fetching surname details")
        raise InternalFault("Failed to fetch surname details")
    return {
        "caste": caste,
        "total_surnames": len(surnames),
        "surnames": surnames,
    }


# ---------------------------
# In-area search: by caste / by category
# ---------------------------
def _totals(db: Session, dimension: Dimension, count_key: str):
    try:
        data = controller.get_dimension_totals(db, dimension)
    except Exception:
        logger.exception(f"Error fetching {dimension.name} totals")
        raise InternalFault(f"Failed to fetch {dimension.name} data")
    return {"success": True, count_key: len(data), "data": data}


def _by_assembly(db: Session, dimension: Dimension, value: Optional[str], name: str):
    value = unwrap(validate_text_param(value, name))
    try:
        total, data = controller.get_assembly_breakdown(db, dimension, value)
    except Exception:
        logger.exception(f"Error fetching assembly data for {dimension.name}")
        raise InternalFault(f"Failed to fetch assembly data for {dimension.name}")
    return {
        "success": True,
        dimension.label_key: value,
        "total_assemblies": len(data),
        "total_count": total,
        "data": data,
    }


@router.get("/by-caste/all")
def get_all_castes_with_count(db: Session = Depends(get_db)):
    return _totals(db, CASTE, "total_castes")


@router.get("/by-caste/assembly")
def get_caste_by_assembly(caste: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return _by_assembly(db, CASTE, caste, "Caste")


@router.get("/by-category/all")
def get_all_categories_with_count(db: Session = Depends(get_db)):
    return _totals(db, CATEGORY, "total_categories")


@router.get("/by-category/assembly")
def get_category_by_assembly(category: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return _by_assembly(db, CATEGORY, category, "Category")
