"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .user_login import UserLoginModel

__all__ = [
    "NotificationModel",
    "UserLoginModel",
]
