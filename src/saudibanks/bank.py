from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Bank:
    """
    One Saudi bank as identified by positions 5-6 of a Saudi IBAN (SAkkBB...).

    Identifier stays a string so leading zeros survive ("05").
    Inactive entries are kept only so that legacy IBANs of merged banks still resolve.
    """

    identifier: str
    english_name: str
    arabic_name: str
    short_code: str
    active: bool = True
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON output; key order is stable."""
        return {
            "identifier": self.identifier,
            "english_name": self.english_name,
            "arabic_name": self.arabic_name,
            "short_code": self.short_code,
            "active": self.active,
            "notes": self.notes,
        }
