"""
Base service for the business logic layer.
Services orchestrate business operations using repositories.
"""

from abc import ABC
import logging

from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.exceptions import NotFoundError


class BaseService(ABC):
    """
    Base service providing the session, the clock and logging helpers.
    All service classes should inherit from this class.
    """

    logger_name = "pantrypal.service"

    def __init__(self, db: Session, clock: Clock = system_clock):
        self.db = db
        self.clock = clock
        self.logger = logging.getLogger(self.logger_name)

    def log_info(self, message: str, **kwargs):
        """Log info message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.info(f"{message} {extra_data}".strip())

    def log_warning(self, message: str, **kwargs):
        """Log warning message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.warning(f"{message} {extra_data}".strip())

    def log_error(self, message: str, **kwargs):
        """Log error message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.error(f"{message} {extra_data}".strip())

    def not_found(self, what: str, **context) -> NotFoundError:
        """Log and build a NotFoundError for the caller to raise"""
        self.log_warning(f"{what} not found", **context)
        return NotFoundError(f"{what} not found", details=context or None)
