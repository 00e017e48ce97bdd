"""
Expiry projection for pantry items.

Pure functions: given the item's expiry date and the current calendar day,
derive the day count, the bucket, display text and the urgency flag. Nothing
here is persisted; it is recomputed on every read.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Union

from domain.enums import ExpiryBucket

DateLike = Union[date, datetime]

EXPIRY_CATALOGS: Dict[str, Dict[ExpiryBucket, str]] = {
    "en": {
        ExpiryBucket.EXPIRED: "expired",
        ExpiryBucket.TODAY: "today",
        ExpiryBucket.TOMORROW: "tomorrow",
        ExpiryBucket.DAY_AFTER_TOMORROW: "day after tomorrow",
        ExpiryBucket.DAYS_FROM_NOW: "{days} days from now",
    },
    "zh": {
        ExpiryBucket.EXPIRED: "已过期",
        ExpiryBucket.TODAY: "今天",
        ExpiryBucket.TOMORROW: "明天",
        ExpiryBucket.DAY_AFTER_TOMORROW: "后天",
        ExpiryBucket.DAYS_FROM_NOW: "{days}天后",
    },
}


@dataclass(frozen=True)
class ExpiryProjection:
    days: int
    bucket: ExpiryBucket
    text: str
    urgent: bool


def _as_day(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def expiry_days(expiry_date: DateLike, today: DateLike) -> int:
    """Whole calendar days from today until expiry (negative once past).

    Both sides are truncated to the day first, so the time of day of
    ``today`` never changes the result.
    """
    return (_as_day(expiry_date) - _as_day(today)).days


def classify(days: int) -> ExpiryBucket:
    if days < 0:
        return ExpiryBucket.EXPIRED
    if days == 0:
        return ExpiryBucket.TODAY
    if days == 1:
        return ExpiryBucket.TOMORROW
    if days == 2:
        return ExpiryBucket.DAY_AFTER_TOMORROW
    return ExpiryBucket.DAYS_FROM_NOW


def expiry_text(days: int, locale: str = "en") -> str:
    catalog = EXPIRY_CATALOGS.get(locale, EXPIRY_CATALOGS["en"])
    return catalog[classify(days)].format(days=days)


def project(expiry_date: DateLike, today: DateLike, locale: str = "en") -> ExpiryProjection:
    days = expiry_days(expiry_date, today)
    return ExpiryProjection(
        days=days,
        bucket=classify(days),
        text=expiry_text(days, locale),
        urgent=days <= 0,
    )
