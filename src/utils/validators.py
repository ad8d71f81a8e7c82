# src/utils/validators.py
"""
Validation of untrusted query/body parameters.

Every validator returns a ``ValidationResult`` and never raises; routers turn
an invalid result into a 400 response.
"""
import enum
import re
from typing import Any, NamedTuple, Optional

from src.utils.errors import ValidationError

ASSEMBLY_ID_MIN = 1
ASSEMBLY_ID_MAX = 999999
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 100
MAX_LIMIT = 1000
MAX_TEXT_LENGTH = 255
MAX_INT = 2**31 - 1  # PostgreSQL INTEGER
MAX_OFFSET = 2**63 - 1  # PostgreSQL BIGINT, the OFFSET type
VIEW_MODES = ("separate", "combined")

_DIGITS = re.compile(r"[0-9]+")
_SQL_INJECTION = re.compile(
    r"('|\"|--|;|\|\||\*|\bOR\b|\bAND\b|\bUNION\b|\bSELECT\b|\bDROP\b|\bINSERT\b|\bUPDATE\b|\bDELETE\b)",
    re.IGNORECASE,
)


class ElectionType(str, enum.Enum):
    AC = "AC"  # assembly election
    PE = "PE"  # parliamentary election


class ValidationResult(NamedTuple):
    valid: bool
    value: Any = None
    error: Optional[str] = None


def _ok(value: Any = None) -> ValidationResult:
    return ValidationResult(True, value, None)


def _fail(error: str) -> ValidationResult:
    return ValidationResult(False, None, error)


def _is_absent(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def _parse_int(raw: Any) -> Optional[int]:
    """Parse a decimal string or an int; anything else (bools, floats, '1.5', '10abc') is None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _DIGITS.fullmatch(raw.strip()):
        return int(raw.strip())
    return None


def _check_assembly_token(token: str) -> Optional[str]:
    if not _DIGITS.fullmatch(token):
        return "Assembly ID must be numeric"
    if not ASSEMBLY_ID_MIN <= int(token) <= ASSEMBLY_ID_MAX:
        return "Assembly ID out of valid range"
    return None


def validate_assembly_id(raw: Any) -> ValidationResult:
    """
    Accepts absent, the literal ``all``, one id in [1, 999999] or a
    comma-separated list of such ids. The first bad token fails the lot.
    """
    if _is_absent(raw):
        return _ok(None)
    if isinstance(raw, bool):
        return _fail("Assembly ID must be numeric")

    text = str(raw).strip()
    if text == "all":
        return _ok("all")

    tokens = [token.strip() for token in text.split(",")]
    for token in tokens:
        error = _check_assembly_token(token)
        if error:
            return _fail(error)
    return _ok(",".join(tokens))


def validate_pagination(page: Any = None, limit: Any = None) -> ValidationResult:
    """Value is a ``(page, limit)`` tuple; out-of-range input is rejected, not clamped."""
    page_num = DEFAULT_PAGE if _is_absent(page) else _parse_int(page)
    limit_num = DEFAULT_LIMIT if _is_absent(limit) else _parse_int(limit)

    if page_num is None or page_num < 1:
        return _fail("Page must be a positive integer")
    if limit_num is None or not 1 <= limit_num <= MAX_LIMIT:
        return _fail(f"Limit must be between 1 and {MAX_LIMIT}")
    if (page_num - 1) * limit_num > MAX_OFFSET:
        return _fail("Page is out of range")
    return _ok((page_num, limit_num))


def validate_text_param(raw: Any, name: str, required: bool = True) -> ValidationResult:
    """
    Free-text names (category, caste, party...). The denylist is an input
    filter on top of parameterized queries, not a replacement for them.
    """
    if _is_absent(raw):
        if required:
            return _fail(f"{name} is required")
        return _ok("")

    text = str(raw).strip()
    if len(text) > MAX_TEXT_LENGTH:
        return _fail(f"{name} is too long (max {MAX_TEXT_LENGTH} characters)")
    if _SQL_INJECTION.search(text):
        return _fail(f"{name} contains invalid characters")
    return _ok(text)


def validate_view_mode(raw: Any) -> ValidationResult:
    if _is_absent(raw):
        return _ok("separate")
    mode = str(raw).strip().lower()
    if mode not in VIEW_MODES:
        return _fail('view_mode must be either "separate" or "combined"')
    return _ok(mode)


def validate_int_param(raw: Any, name: str, minimum: int = 1, maximum: int = MAX_INT) -> ValidationResult:
    if _is_absent(raw):
        return _fail(f"{name} is required")
    number = _parse_int(raw)
    if number is None or number < minimum:
        return _fail(f"{name} must be an integer greater than or equal to {minimum}")
    if number > maximum:
        return _fail(f"{name} is out of range (max {maximum})")
    return _ok(number)


def validate_election_type(raw: Any) -> ValidationResult:
    if _is_absent(raw):
        return _fail("electionType is required")
    try:
        return _ok(ElectionType(str(raw).strip().upper()))
    except ValueError:
        return _fail('electionType must be either "AC" or "PE"')


def unwrap(result: ValidationResult) -> Any:
    """Return the validated value, or raise the 400 error for routers."""
    if not result.valid:
        raise ValidationError(result.error)
    return result.value
