"""
App package - Application configuration and core utilities.
Contains settings, exceptions, the clock, and foundational application code.
"""

from app.config import settings
from app.clock import Clock, FixedClock, system_clock
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    DuplicateNameError,
    CategoryInUseError,
)

__all__ = [
    "settings",
    "Clock",
    "FixedClock",
    "system_clock",
    "ServiceError",
    "ServiceValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "DuplicateNameError",
    "CategoryInUseError",
]
