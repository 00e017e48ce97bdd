"""
Domain layer - Business entities, models, schemas, enums and the expiry projection.
"""

from domain import enums, expiry, models, schemas

__all__ = ["enums", "expiry", "models", "schemas"]
