from __future__ import annotations

import re

from saudibanks.errors import MalformedIbanError

SAUDI_COUNTRY_CODE = "SA"
SAUDI_IBAN_LENGTH = 24
# SAkkBB... -> bank identifier sits right after country code and check digits
BANK_IDENTIFIER_SLICE = slice(4, 6)

_IBAN_RE = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]{11,30}$")


def normalize_iban(s: str) -> str:
    """Normalize IBAN-like string: remove spaces, upper-case."""
    return (s or "").replace(" ", "").upper()


def is_saudi_iban_shape(iban: str) -> bool:
    normalized = normalize_iban(iban)
    return len(normalized) == SAUDI_IBAN_LENGTH and normalized.startswith(SAUDI_COUNTRY_CODE)


def extract_bank_identifier(iban: str) -> str:
    """
    Returns the two-character bank identifier of a Saudi IBAN.

    Only length and country prefix are checked; the content of the window is
    passed on as-is so an unknown code surfaces as a lookup miss later.
    """
    normalized = normalize_iban(iban)
    if not is_saudi_iban_shape(normalized):
        raise MalformedIbanError(normalized)
    return normalized[BANK_IDENTIFIER_SLICE]


def is_valid_iban(iban: str) -> bool:
    """Offline IBAN checksum validation (ISO 13616 / mod-97)."""
    iban = normalize_iban(iban)
    if not iban or not _IBAN_RE.match(iban):
        return False
    # Move first 4 chars to the end
    rearranged = iban[4:] + iban[:4]
    # Convert letters to numbers: A=10..Z=35
    digits = []
    for ch in rearranged:
        if ch.isdigit():
            digits.append(ch)
        else:
            digits.append(str(ord(ch) - 55))
    num = "".join(digits)
    # mod 97 in chunks to avoid huge ints
    rem = 0
    for i in range(0, len(num), 9):
        rem = int(str(rem) + num[i:i + 9]) % 97
    return rem == 1


def is_valid_saudi_iban(iban: str) -> bool:
    """Saudi shape (24 chars, "SA" prefix) plus mod-97 checksum."""
    return is_saudi_iban_shape(iban) and is_valid_iban(iban)
