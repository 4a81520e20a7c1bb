from types import MappingProxyType

import pytest

from countries import ISO2_TO_NAME, parse_country


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_empty_input_returns_empty_string(raw) -> None:
    assert parse_country(raw) == ""


@pytest.mark.parametrize("raw, expected", [
    ("['FR']", "France"),
    ('["FR"]', "France"),
    ("FR", "France"),
    ("fr", "France"),
    ("  ['us']  ", "United States of America"),
    ("['GB', 'DE']", "United Kingdom"),
])
def test_mapped_codes_resolve_to_names(raw: str, expected: str) -> None:
    assert parse_country(raw) == expected


def test_unmapped_code_is_upper_cased() -> None:
    assert parse_country("['xx']") == "XX"


def test_empty_list_returns_empty_string() -> None:
    assert parse_country("[]") == ""


def test_list_of_blank_pieces_returns_empty_string() -> None:
    assert parse_country("['', ' ']") == ""


def test_only_first_country_is_kept() -> None:
    """Multi-country rows are reduced to the first listed code."""
    assert parse_country("['DE', 'FR']") == "Germany"


def test_leading_empty_piece_is_skipped() -> None:
    assert parse_country("[, 'JP']") == "Japan"


def test_non_string_input_is_stringified() -> None:
    assert parse_country(42) == "42"


def test_custom_table_can_be_injected() -> None:
    names = {"PT": "Portugal"}
    assert parse_country("['pt']", names=names) == "Portugal"
    assert parse_country("['FR']", names=names) == "FR"


def test_default_table_is_read_only() -> None:
    assert isinstance(ISO2_TO_NAME, MappingProxyType)
    assert len(ISO2_TO_NAME) == 30
    with pytest.raises(TypeError):
        ISO2_TO_NAME["PT"] = "Portugal"  # type: ignore[index]
