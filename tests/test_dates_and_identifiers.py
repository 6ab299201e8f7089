# /tests/test_dates_and_identifiers.py

from datetime import date, datetime, timedelta, timezone

import pytest

from school_admin.services.dates import as_utc, to_utc_day
from school_admin.services.identifiers import new_id, is_valid_id, CLASS_PREFIX, STUDENT_PREFIX


@pytest.mark.parametrize("raw, expected", [
    ("2024-01-10", date(2024, 1, 10)),
    ("2024-01-10T00:00:00Z", date(2024, 1, 10)),
    ("2024-01-10T23:59:59.999Z", date(2024, 1, 10)),
    ("2024-01-10T02:00:00+05:00", date(2024, 1, 9)),
    (datetime(2024, 1, 10, 22, 0, tzinfo=timezone.utc), date(2024, 1, 10)),
    (date(2024, 1, 10), date(2024, 1, 10)),
])
def test_to_utc_day(raw, expected):
    assert to_utc_day(raw) == expected


@pytest.mark.parametrize("raw", ["", "yesterday", "2024-13-01", "10/01/2024"])
def test_to_utc_day_rejects_garbage(raw):
    with pytest.raises(ValueError):
        to_utc_day(raw)


def test_ids_are_checked_against_their_prefix():
    class_id = new_id(CLASS_PREFIX)

    assert is_valid_id(class_id, CLASS_PREFIX)
    assert not is_valid_id(class_id, STUDENT_PREFIX)
    assert not is_valid_id("cls_XYZ", CLASS_PREFIX)
    assert not is_valid_id(None, CLASS_PREFIX)


def test_as_utc_tags_naive_datetimes_only():
    naive = datetime(2024, 1, 10, 8, 30)
    plus_five = timezone(timedelta(hours=5))
    aware = datetime(2024, 1, 10, 8, 30, tzinfo=plus_five)

    assert as_utc(naive) == datetime(2024, 1, 10, 8, 30, tzinfo=timezone.utc)
    assert as_utc(aware).tzinfo is plus_five
