"""ORM models - import all so Base.metadata is complete for table creation."""

from app.models.user import User

__all__ = ["User"]
