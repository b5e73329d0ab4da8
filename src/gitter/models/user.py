# src/gitter/models/user.py
"""SQLAlchemy model for registered users."""

from __future__ import annotations

from sqlalchemy import BigInteger, LargeBinary, Text
from sqlalchemy.orm import Mapped, mapped_column

from gitter.db.session import Base


class User(Base):
    """Username/password identity.

    The random ``id`` doubles as the salt source for ``hashed_password``.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    hashed_password: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
