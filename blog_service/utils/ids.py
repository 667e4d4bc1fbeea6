"""Helpers for the 24-character hexadecimal record identifiers."""

from itertools import count
from re import compile as re_compile
from secrets import randbelow, token_hex
from threading import Lock
from time import time

from blog_service.configs.settings import OBJECT_ID_PATTERN

_OBJECT_ID_RE = re_compile(OBJECT_ID_PATTERN)

_PROCESS_TOKEN = token_hex(5)
_COUNTER = count(randbelow(0xFFFFFF))
_LOCK = Lock()
_last_issued = "0" * 24


def new_object_id() -> str:
    """
    Generate a new record identifier.

    Layout: 8 hex characters of epoch seconds, 10 hex characters fixed for
    the process, then a 6 hex character counter. Ids issued by one process
    are strictly increasing, so they order records created within the same
    second.
    """
    global _last_issued  # noqa: PLW0603
    with _LOCK:
        seconds = max(int(time()), int(_last_issued[:8], 16))
        suffix = f"{_PROCESS_TOKEN}{next(_COUNTER) & 0xFFFFFF:06x}"
        candidate = f"{seconds:08x}{suffix}"
        # Counter wrapped within one second
        if candidate <= _last_issued:
            candidate = f"{seconds + 1:08x}{suffix}"
        _last_issued = candidate
        return candidate


def is_object_id(value: object) -> bool:
    """Return True if ``value`` is a 24-character hexadecimal string."""
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None
