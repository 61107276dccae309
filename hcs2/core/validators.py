# hcs2/core/validators.py
"""
Pure input validators used at every prompt.

Each ``validate_*`` returns ``None`` when the value is accepted, otherwise the
message shown to the user before re-asking.
"""

import re
from typing import Optional

TOPIC_ID_PATTERN = re.compile(r"0\.[0-9]+\.[0-9]+")
MAX_MEMO_LENGTH = 500

INVALID_TOPIC_ID = "Please enter a valid Topic ID."
INVALID_UID = "UID must be a valid number."
MEMO_TOO_LONG = f"Memo must be {MAX_MEMO_LENGTH} characters or less."
INVALID_NUMBER = "Please enter a valid number"
NOT_POSITIVE = "Please enter a positive number"


def is_valid_topic_id(value: str) -> bool:
    return TOPIC_ID_PATTERN.fullmatch(value) is not None


def is_valid_uid(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return bool(value) and all("0" <= ch <= "9" for ch in value)


def memo_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def is_valid_memo(value: str) -> bool:
    return memo_length(value) <= MAX_MEMO_LENGTH


def validate_topic_id(value: str) -> Optional[str]:
    return None if is_valid_topic_id(value) else INVALID_TOPIC_ID


def validate_uid(value: str) -> Optional[str]:
    return None if is_valid_uid(value) else INVALID_UID


def validate_memo(value: str) -> Optional[str]:
    return None if is_valid_memo(value) else MEMO_TOO_LONG


def validate_ttl(value: str) -> Optional[str]:
    try:
        ttl = int(value.strip())
    except ValueError:
        return INVALID_NUMBER
    if ttl <= 0:
        return NOT_POSITIVE
    return None
