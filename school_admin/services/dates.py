# /school_admin/services/dates.py

from datetime import date, datetime, timezone
from typing import Union


def to_utc_day(value: Union[str, date, datetime]) -> date:
    """
    Reduces a date, datetime or ISO-8601 string to its calendar day in UTC.

    Datetimes carrying an offset are converted to UTC first, so
    "2024-01-10T23:30:00-05:00" becomes 2024-01-11. Naive datetimes are
    taken to already be in UTC. Raises ValueError for unparseable strings.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value
    else:
        text = str(value).strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        moment = datetime.fromisoformat(text)

    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def as_utc(moment: datetime) -> datetime:
    """
    Tags a naive datetime as UTC. SQLite hands timestamps back without an
    offset even though they were written in UTC.
    """
    if isinstance(moment, datetime) and moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
