import re
from typing import Iterator, List, Optional

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_phone_list(stored: Optional[str]) -> List[str]:
    """
    Split a stored comma-joined phone string into display entries.
    Segments are trimmed and empty ones are dropped.
    """
    return [part.strip() for part in (stored or "").split(",") if part.strip()]


class ContactNumberSet:
    """
    Ordered set of formatted contact numbers ("<countryCode> <digits>").
    Uniqueness is by exact string, so the same digits under two country
    codes are two entries.
    """

    def __init__(self):
        self._values: List[str] = []

    def add(self, raw_input: str, country_code: str) -> bool:
        digits = _NON_DIGITS.sub("", raw_input or "")
        if not digits:
            return False
        formatted = f"{country_code} {digits}"
        if formatted in self._values:
            return False
        self._values.append(formatted)
        return True

    def remove(self, formatted_value: str) -> bool:
        if formatted_value not in self._values:
            return False
        self._values.remove(formatted_value)
        return True

    def joined(self) -> str:
        return ",".join(self._values)

    def clear(self):
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __contains__(self, value: object) -> bool:
        return value in self._values
