from __future__ import annotations


class BankLookupError(ValueError):
    """Base for lookup failures; `value` is the normalized input that failed."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class MalformedIbanError(BankLookupError):
    def __init__(self, value: str):
        super().__init__('Expected a 24-character Saudi IBAN starting with "SA".', value)


class BankNotFoundError(BankLookupError, LookupError):
    def __init__(self, identifier: str):
        super().__init__(f"No bank found with IBAN identifier {identifier}", identifier)

    @property
    def identifier(self) -> str:
        return self.value
