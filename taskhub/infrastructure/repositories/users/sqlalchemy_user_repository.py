# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from taskhub.domain.users.entities import User as DomainUser
from taskhub.domain.users.exceptions import UserAlreadyExistsError
from taskhub.domain.users.repositories import UserRepository
from taskhub.infrastructure.db.models import User
from taskhub.infrastructure.db.session import SessionFactory, session_scope
from taskhub.infrastructure.repositories.mapping import as_utc, is_row_id
from taskhub.shared.logging import logger


def to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return to_domain_user(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        if not is_row_id(user_id):
            return None
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return to_domain_user(row) if row else None

    def insert(self, username: str, password_hash: str) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return to_domain_user(row)
        except IntegrityError as exc:
            # the unique index on users.username is the only constraint an insert can hit
            logger.info(f"users.insert: duplicate username={username!r}")
            raise UserAlreadyExistsError() from exc

    def list_all(self) -> Sequence[DomainUser]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(select(User).order_by(User.id.asc())).all()
            return [to_domain_user(row) for row in rows]

    def delete(self, user_id: int) -> bool:
        if not is_row_id(user_id):
            return False
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is None:
                return False
            session.delete(row)
            return True
