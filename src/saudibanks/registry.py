from __future__ import annotations

import logging
from typing import Tuple

from saudibanks.bank import Bank
from saudibanks.data import BANKS
from saudibanks.errors import BankNotFoundError, MalformedIbanError
from saudibanks.utils.iban import extract_bank_identifier

log = logging.getLogger(__name__)


def list_all() -> Tuple[Bank, ...]:
    """All known banks, including inactive legacy identifiers."""
    return BANKS


def normalize_identifier(raw: str) -> str:
    # "5" -> "05"; input of 2+ characters is returned stripped only
    return (raw or "").strip().rjust(2, "0")


def find_by_identifier(raw: str) -> Bank:
    """
    Lookup by the two-digit IBAN identifier.

    Raises BankNotFoundError carrying the normalized identifier when nothing matches.
    """
    normalized = normalize_identifier(raw)
    for bank in BANKS:
        if bank.identifier == normalized:
            return bank
    log.debug("Bank identifier not found: raw=%r normalized=%s", raw, normalized)
    raise BankNotFoundError(normalized)


def find_by_iban(raw: str) -> Bank:
    """
    Resolve the bank from a full Saudi IBAN (spaces allowed, any letter case).

    A string that is not 24 characters long or does not start with "SA" raises
    MalformedIbanError; a well-formed IBAN with an unknown bank code raises
    BankNotFoundError. The mod-97 checksum is not verified here.
    """
    try:
        identifier = extract_bank_identifier(raw)
    except MalformedIbanError as exc:
        log.debug("Malformed Saudi IBAN rejected: normalized=%s len=%d", exc.value, len(exc.value))
        raise
    return find_by_identifier(identifier)
