"""Lookup of Saudi banks by IBAN identifier or full Saudi IBAN."""

from .bank import Bank
from .data import BANKS
from .errors import BankLookupError, BankNotFoundError, MalformedIbanError
from .registry import find_by_iban, find_by_identifier, list_all, normalize_identifier
from .utils.config import Settings, load_settings
from .utils.iban import is_valid_iban, is_valid_saudi_iban, normalize_iban
from .utils.logging_setup import log_event, setup_logging

__all__ = [
    "Bank",
    "BANKS",
    "BankLookupError",
    "BankNotFoundError",
    "MalformedIbanError",
    "find_by_iban",
    "find_by_identifier",
    "list_all",
    "normalize_identifier",
    "is_valid_iban",
    "is_valid_saudi_iban",
    "normalize_iban",
    "Settings",
    "load_settings",
    "log_event",
    "setup_logging",
]
