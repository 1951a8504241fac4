from __future__ import annotations

import pytest

from saudibanks.errors import MalformedIbanError
from saudibanks.utils.iban import (
    extract_bank_identifier,
    is_saudi_iban_shape,
    is_valid_iban,
    is_valid_saudi_iban,
    normalize_iban,
)


def test_normalize_iban_strips_spaces_and_uppercases() -> None:
    assert normalize_iban("sa03 8000 0000 6080 1016 7519") == "SA0380000000608010167519"
    assert normalize_iban("") == ""


def test_is_saudi_iban_shape() -> None:
    assert is_saudi_iban_shape("SA0380000000608010167519") is True
    assert is_saudi_iban_shape("SA038000") is False
    assert is_saudi_iban_shape("GB0380000000608010167519") is False


def test_extract_bank_identifier() -> None:
    assert extract_bank_identifier("sa03 8000 0000 6080 1016 7519") == "80"
    with pytest.raises(MalformedIbanError):
        extract_bank_identifier("SA03")


def test_is_valid_iban_checksum() -> None:
    assert is_valid_iban("SA03 8000 0000 6080 1016 7519") is True
    assert is_valid_iban("SA04 8000 0000 6080 1016 7519") is False
    assert is_valid_iban("not an iban") is False
    assert is_valid_iban("") is False


def test_is_valid_saudi_iban_needs_shape_and_checksum() -> None:
    assert is_valid_saudi_iban("sa03 8000 0000 6080 1016 7519") is True
    assert is_valid_saudi_iban("SA0480000000608010167519") is False
    # valid German IBAN, wrong country for this table
    assert is_valid_iban("DE89370400440532013000") is True
    assert is_valid_saudi_iban("DE89370400440532013000") is False
