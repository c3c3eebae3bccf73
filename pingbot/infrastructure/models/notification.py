"""SQLAlchemy model for persisted pings."""

from sqlalchemy import BigInteger, Column, DateTime, Index, Integer, String, Text

from pingbot.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for a ping waiting to be delivered."""

    __tablename__ = "notifications"
    __table_args__ = (Index("ix_notifications_user_origin", "user_id", "origin_url"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(BigInteger, nullable=False, index=True)
    origin_url = Column(String(1024), nullable=False)
    origin_html = Column(Text, nullable=False)
    time = Column(DateTime(), nullable=False)
    short_description = Column(Text, nullable=True)
    team_name = Column(String(255), nullable=True)


__all__ = ["NotificationModel"]
