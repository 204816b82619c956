"""Date parsing for date-bound validation rules."""

from datetime import date, datetime, time, timedelta

# Relative keywords, as day offsets from today at midnight
RELATIVE_DAYS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def parse_date(value: str | date | datetime, now: datetime | None = None) -> datetime:
    """Parse a rule parameter into a datetime.

    Accepts datetime/date objects, ISO-8601 strings and the keywords
    ``now``, ``today``, ``tomorrow`` and ``yesterday``.

    Args:
        value: The date to parse
        now: Reference time for relative keywords (default: current time)

    Returns:
        Parsed datetime

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    text = str(value).strip()
    keyword = text.lower()
    now = now or datetime.now()

    if keyword == "now":
        return now
    if keyword in RELATIVE_DAYS:
        midnight = datetime.combine(now.date(), time.min)
        return midnight + timedelta(days=RELATIVE_DAYS[keyword])

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Unable to parse date: {value!r}")
