import pytest

from src.routers.surname.utilities import FilterKind, build_assembly_filter
from src.utils.errors import InvalidAssemblyFilter, ValidationError
from src.utils.validators import (
    ElectionType,
    unwrap,
    validate_assembly_id,
    validate_election_type,
    validate_int_param,
    validate_pagination,
    validate_text_param,
    validate_view_mode,
)


@pytest.mark.parametrize("raw, expected", [
    (None, None),
    ("", None),
    ("all", "all"),
    ("7", "7"),
    (42, "42"),
    ("999999", "999999"),
    ("1,2,3", "1,2,3"),
    ("1, 2 ,3", "1,2,3"),
])
def test_assembly_id_accepts(raw, expected):
    result = validate_assembly_id(raw)
    assert result.valid is True
    assert result.value == expected


@pytest.mark.parametrize("raw, error", [
    ("0", "Assembly ID out of valid range"),
    ("1000000", "Assembly ID out of valid range"),
    ("abc", "Assembly ID must be numeric"),
    ("-5", "Assembly ID must be numeric"),
    ("1,x,0", "Assembly ID must be numeric"),
    ("1,0,x", "Assembly ID out of valid range"),
    ("1,,2", "Assembly ID must be numeric"),
    ("1;DROP", "Assembly ID must be numeric"),
    ("١", "Assembly ID must be numeric"),
])
def test_assembly_id_rejects_on_first_bad_token(raw, error):
    result = validate_assembly_id(raw)
    assert result.valid is False
    assert result.error == error


def test_pagination_defaults():
    assert validate_pagination().value == (1, 100)
    assert validate_pagination("", None).value == (1, 100)


@pytest.mark.parametrize("page, limit", [(2, 10), ("3", "1000"), (1, "1")])
def test_pagination_accepts(page, limit):
    assert validate_pagination(page, limit).valid


@pytest.mark.parametrize("page, limit, error", [
    (0, 10, "Page must be a positive integer"),
    ("two", 10, "Page must be a positive integer"),
    (1.5, 10, "Page must be a positive integer"),
    (1, 0, "Limit must be between 1 and 1000"),
    (1, 1001, "Limit must be between 1 and 1000"),
    (1, "10abc", "Limit must be between 1 and 1000"),
])
def test_pagination_rejects_without_clamping(page, limit, error):
    result = validate_pagination(page, limit)
    assert result.valid is False
    assert result.error == error


def test_text_param_trims_and_accepts_devanagari():
    result = validate_text_param("  गोंड ", "Caste")
    assert result.valid
    assert result.value == "गोंड"


def test_text_param_required_and_optional():
    assert validate_text_param(None, "Caste").error == "Caste is required"
    assert validate_text_param("   ", "Caste").error == "Caste is required"
    assert validate_text_param(None, "Caste", required=False).value == ""


def test_text_param_length_counts_code_points():
    assert validate_text_param("अ" * 255, "Category").valid
    assert validate_text_param("अ" * 256, "Category").error == "Category is too long (max 255 characters)"


@pytest.mark.parametrize("raw", [
    "OBC' OR '1'='1",
    'OBC"',
    "OBC--",
    "OBC; DROP TABLE users",
    "a || b",
    "*",
    "x union select 1",
    "delete",
    "Sahu and Teli",
])
def test_text_param_denylist(raw):
    result = validate_text_param(raw, "Category")
    assert result.valid is False
    assert result.error == "Category contains invalid characters"


def test_text_param_keywords_only_match_whole_words():
    assert validate_text_param("Oraon", "Caste").valid
    assert validate_text_param("Mandal", "Caste").valid


@pytest.mark.parametrize("raw, expected", [
    (None, "separate"),
    ("", "separate"),
    ("combined", "combined"),
    ("  COMBINED ", "combined"),
    ("Separate", "separate"),
])
def test_view_mode(raw, expected):
    assert validate_view_mode(raw).value == expected


def test_view_mode_rejects_unknown():
    assert validate_view_mode("merged").valid is False


def test_int_param():
    assert validate_int_param("2008", "Year").value == 2008
    assert validate_int_param(None, "Year").error == "Year is required"
    assert validate_int_param("20x8", "Year").valid is False
    assert validate_int_param("0", "Year").valid is False


def test_election_type():
    assert validate_election_type("ac").value is ElectionType.AC
    assert validate_election_type(" PE ").value is ElectionType.PE
    assert validate_election_type("LS").valid is False
    assert validate_election_type(None).valid is False


def test_unwrap_raises_validation_error():
    with pytest.raises(ValidationError) as excinfo:
        unwrap(validate_view_mode("merged"))
    assert excinfo.value.status_code == 400
    assert unwrap(validate_view_mode(None)) == "separate"


def test_filter_builder_kinds():
    assert build_assembly_filter(None).kind is FilterKind.ANY
    assert build_assembly_filter("").kind is FilterKind.ANY

    all_filter = build_assembly_filter("all")
    assert all_filter.kind is FilterKind.ALL
    assert all_filter.combinable and not all_filter.single

    single = build_assembly_filter("5")
    assert single.kind is FilterKind.EQUALS
    assert single.ids == (5,)
    assert single.single and not single.combinable

    member = build_assembly_filter("1,2,3")
    assert member.kind is FilterKind.MEMBER
    assert member.ids == (1, 2, 3)
    assert member.combinable


@pytest.mark.parametrize("raw", ["x", "1,x", "1,,2", "-1"])
def test_filter_builder_rejects_malformed_tokens(raw):
    with pytest.raises(InvalidAssemblyFilter):
        build_assembly_filter(raw)


def test_pagination_rejects_offset_beyond_bigint():
    assert validate_pagination(10**20, 10).error == "Page is out of range"
    assert validate_pagination(str(2**63 // 1000 + 2), "1000").error == "Page is out of range"
    assert validate_pagination(2**63 // 1000, 1000).valid


def test_int_param_upper_bound():
    assert validate_int_param(str(2**31 - 1), "Position").value == 2**31 - 1
    assert validate_int_param(str(2**31), "Position").error == "Position is out of range (max 2147483647)"
    assert validate_int_param("9" * 25, "Year").valid is False
    assert validate_int_param("2020", "Year", maximum=2019).error == "Year is out of range (max 2019)"
