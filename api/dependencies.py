"""
API dependencies for dependency injection
"""

from dataclasses import dataclass
from typing import Generator, Optional
from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from app.clock import Clock, system_clock
from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_clock() -> Clock:
    """Clock dependency; tests override it with a FixedClock"""
    return system_clock


def get_current_user_id(request: Request) -> str:
    """
    Caller identity from the header set by the upstream auth proxy.

    Raises:
        UnauthorizedError: header missing or blank
    """
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        raise UnauthorizedError(f"Missing {settings.user_id_header} header")
    return user_id


@dataclass
class PageParams:
    page: int
    page_size: int


def get_page_params(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    page_size: Optional[int] = Query(
        None, ge=1, description="Items per page (capped at the configured maximum)"
    ),
) -> PageParams:
    size = page_size or settings.default_page_size
    return PageParams(page=page, page_size=min(size, settings.max_page_size))
