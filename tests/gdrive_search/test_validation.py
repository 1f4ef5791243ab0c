from __future__ import annotations

import pytest

from certificate_finder.gdrive_search import (
    ErrorClassification,
    SearchError,
    filter_identifier_input,
    validate_identifier,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1234567890", "1234567890"),
        ("  0012345678 ", "0012345678"),
        ("\t9999999999\n", "9999999999"),
    ],
)
def test_validate_identifier_accepts_ten_digits(raw: str, expected: str) -> None:
    assert validate_identifier(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "\n\t", None])
def test_validate_identifier_rejects_empty_input(raw: str | None) -> None:
    with pytest.raises(SearchError) as excinfo:
        validate_identifier(raw)

    assert excinfo.value.kind is ErrorClassification.EMPTY_INPUT
    assert excinfo.value.message == "NISN must not be empty"


@pytest.mark.parametrize(
    "raw",
    [
        "123456789",
        "12345678901",
        "12345abcde",
        "12345 67890",
        "1234567890\n1",
        "'123456789",
        "１２３４５６７８９０",  # full-width digits
        "١٢٣٤٥٦٧٨٩٠",  # Arabic-Indic digits
    ],
)
def test_validate_identifier_rejects_wrong_shape(raw: str) -> None:
    with pytest.raises(SearchError) as excinfo:
        validate_identifier(raw)

    assert excinfo.value.kind is ErrorClassification.INVALID_FORMAT
    assert "10 digits" in str(excinfo.value)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("12-34 56", "123456"),
        ("abc", ""),
        ("123456789012345", "1234567890"),
        ("NISN: 0012345678!", "0012345678"),
        ("１２3", "3"),
    ],
)
def test_filter_identifier_input(raw: str, expected: str) -> None:
    assert filter_identifier_input(raw) == expected


@pytest.mark.parametrize("raw", ["1234567890", "98x76-54 3210 11", "42", ""])
def test_filter_is_idempotent_and_prefix_monotonic(raw: str) -> None:
    filtered = filter_identifier_input(raw)

    assert filter_identifier_input(filtered) == filtered
    for cut in range(len(filtered) + 1):
        assert filtered.startswith(filter_identifier_input(filtered[:cut]))
