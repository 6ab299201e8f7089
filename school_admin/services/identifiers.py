# /school_admin/services/identifiers.py

"""
Server-generated identifiers look like `cls_1a2b3c4d5e6f`: a short prefix
naming the entity followed by twelve hex characters. Handlers use
`is_valid_id` to reject malformed ids before touching the database.
"""

import re
import uuid
from typing import Optional

CLASS_PREFIX = "cls"
STUDENT_PREFIX = "stu"
ATTENDANCE_PREFIX = "att"

_ID_PATTERN = re.compile(r"^(?P<prefix>[a-z]{3})_[0-9a-f]{12}$")


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def is_valid_id(value: Optional[str], prefix: str) -> bool:
    if not isinstance(value, str):
        return False
    match = _ID_PATTERN.match(value)
    return bool(match) and match.group("prefix") == prefix
