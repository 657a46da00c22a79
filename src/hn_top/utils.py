from __future__ import annotations
from typing import Hashable, Iterable, List, Optional, Pattern, TypeVar
from urllib.parse import urlsplit
import re

T = TypeVar("T", bound=Hashable)

RANK_RE = re.compile(r"^(\d+)\.$", re.IGNORECASE)
POINTS_RE = re.compile(r"^(\d+)\s(points?)$", re.IGNORECASE)
COMMENTS_RE = re.compile(r"^(\d+)\s(comments?)$", re.IGNORECASE)

def count_by_regex(text: Optional[str], pattern: Pattern[str]) -> int:
    """First capture group of `pattern` as an int; 0 when the text does not match."""
    if not text:
        return 0
    m = pattern.match(text.strip())
    return int(m.group(1)) if m else 0

def is_absolute_uri(value: Optional[str]) -> bool:
    """True iff value has both a scheme and a network location."""
    if not value or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)

def unique(items: Iterable[T]) -> List[T]:
    """Drop repeats, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))
