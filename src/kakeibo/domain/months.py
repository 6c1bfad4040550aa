import re
from datetime import date, datetime

from kakeibo.errors import InvalidMonthKey

_MONTH_KEY = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def current_month_key(today: date | None = None) -> str:
    return (today or date.today()).strftime("%Y-%m")


def is_month_key(value: str | None) -> bool:
    return bool(value) and _MONTH_KEY.match(value) is not None


def parse_month_key(value: str | None, today: date | None = None) -> str:
    """Return ``value`` as a month key, or the current month when it is empty."""
    if not value:
        return current_month_key(today)
    value = value.strip()
    if not is_month_key(value):
        raise InvalidMonthKey(f"Month must look like YYYY-MM, got '{value}'")
    return value


def parse_entry_date(value: str) -> str:
    """Normalise a ``YYYY-MM-DD`` string; raises ``ValueError`` when malformed."""
    return datetime.strptime(value.strip(), "%Y-%m-%d").strftime("%Y-%m-%d")
