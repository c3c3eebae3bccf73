"""Persistence helpers for ping notifications."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import assert_never

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from pingbot.domain.entities import (
    Identifier,
    Notification,
    NotificationId,
    NotificationUrl,
)
from pingbot.infrastructure.models import NotificationModel, UserLoginModel
from pingbot.utils import ensure_app_naive_datetime, ensure_app_timezone


class NotificationRepository:
    """Notification ledger backed by a SQLAlchemy session.

    Each public method commits on its own so that a failing write never undoes
    the writes that came before it.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def record_username(self, user_id: int, login: str) -> None:
        try:
            self._upsert_username(user_id, login)
        except IntegrityError:
            # Another writer inserted the id between our read and our insert.
            self._upsert_username(user_id, login)

    def record_notification(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        with self._unit_of_work():
            self.session.add(model)
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_notification(self, user_id: int, identifier: Identifier) -> int:
        with self._unit_of_work():
            deleted = self._query_by_identifier(user_id, identifier).delete(
                synchronize_session=False
            )
        return deleted

    def find_notification(
        self, user_id: int, identifier: Identifier
    ) -> Notification | None:
        model = (
            self._query_by_identifier(user_id, identifier)
            .order_by(NotificationModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.time.asc(), NotificationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get_username(self, user_id: int) -> str | None:
        model = self.session.get(UserLoginModel, user_id)
        return model.username if model else None

    def _upsert_username(self, user_id: int, login: str) -> None:
        with self._unit_of_work():
            model = self.session.get(UserLoginModel, user_id)
            if model is None:
                self.session.add(UserLoginModel(user_id=user_id, username=login))
            else:
                model.username = login

    def _query_by_identifier(self, user_id: int, identifier: Identifier) -> Query:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if isinstance(identifier, NotificationId):
            return query.filter(NotificationModel.id == identifier.value)
        if isinstance(identifier, NotificationUrl):
            return query.filter(NotificationModel.origin_url == identifier.url)
        assert_never(identifier)

    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.user_id = notification.user_id
        model.origin_url = notification.origin_url
        model.origin_html = notification.origin_html
        model.time = ensure_app_naive_datetime(notification.time)
        model.short_description = notification.short_description
        model.team_name = notification.team_name

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            origin_url=model.origin_url,
            origin_html=model.origin_html,
            time=ensure_app_timezone(model.time),
            short_description=model.short_description,
            team_name=model.team_name,
        )


__all__ = ["NotificationRepository"]
