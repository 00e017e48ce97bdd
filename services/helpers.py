"""
PantryPal utility functions shared by the services
"""

from __future__ import annotations
import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from app.exceptions import ServiceValidationError

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"


# Dates

def parse_date(value: str, field: str = "date") -> date:
    """Parse a YYYY-MM-DD string or raise ServiceValidationError."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ServiceValidationError(
            f"Invalid {field}: expected YYYY-MM-DD", details={"field": field, "value": value}
        )


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_month(value: str) -> Tuple[datetime, datetime]:
    """Parse YYYY-MM into [first instant of month, first instant of next month)."""
    try:
        start = datetime.strptime(value, MONTH_FORMAT)
    except (TypeError, ValueError):
        raise ServiceValidationError(
            "Invalid month: expected YYYY-MM", details={"field": "month", "value": value}
        )
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def day_range(start: Optional[str], end: Optional[str]) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Bounds for an inclusive date range; the end day is covered in full."""
    start_at = None
    end_before = None
    if start:
        start_at = datetime.combine(parse_date(start, "startDate"), datetime.min.time())
    if end:
        end_day = parse_date(end, "endDate") + timedelta(days=1)
        end_before = datetime.combine(end_day, datetime.min.time())
    return start_at, end_before


# Quantities & text

def format_quantity(quantity: float, unit: str) -> str:
    """Render quantity plus unit: integral values without decimals, others with two."""
    if float(quantity).is_integer():
        number = str(int(quantity))
    else:
        number = f"{quantity:.2f}"
    return f"{number}{unit}"


def normalize_text(s: str) -> str:
    """Basic normalization: lowercase, collapse spaces, strip punctuation edges."""
    s = s.lower().strip()
    s = re.sub(r"[()\[\],.;:]+", " ", s)
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def parse_minutes(text: str) -> Optional[int]:
    """First integer in a free-text duration such as '15 min' or '约20分钟'."""
    match = re.search(r"\d+", text or "")
    return int(match.group()) if match else None


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated query value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def names_overlap(left: str, candidates: Iterable[str]) -> bool:
    """True if ``left`` contains or is contained in any candidate (normalized)."""
    a = normalize_text(left)
    if not a:
        return False
    for other in candidates:
        b = normalize_text(other)
        if b and (a in b or b in a):
            return True
    return False
