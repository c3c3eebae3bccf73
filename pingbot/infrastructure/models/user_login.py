"""SQLAlchemy model caching display logins for account ids."""

from sqlalchemy import BigInteger, Column, String

from pingbot.infrastructure.database import Base


class UserLoginModel(Base):
    """Last known login for a platform account id."""

    __tablename__ = "users"

    user_id = Column(BigInteger, primary_key=True, autoincrement=False)
    username = Column(String(255), nullable=False)


__all__ = ["UserLoginModel"]
