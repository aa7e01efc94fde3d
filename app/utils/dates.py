from datetime import date, datetime


def parse_date(value) -> date:
    """Parse a booking bound into a calendar date.

    Accepts ``YYYY-MM-DD`` or a full ISO-8601 datetime (``2024-01-10T00:00:00.000Z``,
    as sent by browsers). The whole string must parse; only the calendar date
    written in it is kept. Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date: {value!r}")
    value = value.strip()
    if "T" in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)
