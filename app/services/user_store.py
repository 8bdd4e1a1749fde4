"""Credential store: user lookup by email and insert under the unique-email constraint."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError
from app.models.user import User


class UserStore:
    """Thin async wrapper over the ``users`` table for one request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create(self, *, name: str, email: str, password_hash: str) -> User:
        """Insert and commit a new user.

        A unique-constraint violation means another registration for the
        same email committed first; it is reported as ``ConflictError``.
        """
        user = User(name=name, email=email, password_hash=password_hash)
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError() from exc
        return user
