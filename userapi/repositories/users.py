"""Data access for user records.

Every lookup by id validates the id format before touching the store, and
store-level failures come back as domain errors: uniqueness violations as
``UsernameTaken``, connectivity problems as ``Unavailable``.
"""
import datetime as dt
import logging
import uuid
from typing import Callable

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from userapi.errors import InvalidId, Unavailable, UsernameTaken
from userapi.models.user import User, utcnow

logger = logging.getLogger(__name__)

ASCENDING = "asc"
DESCENDING = "desc"
_ASCENDING_ALIASES = {"asc", "ascending"}
# Largest value the store accepts for LIMIT/OFFSET
MAX_STORE_INT = 2**63 - 1


def parse_user_id(raw) -> str:
    """Return the canonical form of a user id, or raise InvalidId."""
    if not isinstance(raw, str):
        raise InvalidId()
    try:
        return str(uuid.UUID(raw))
    except ValueError as exc:
        raise InvalidId() from exc


def _parse_int(raw, default: int, minimum: int = 0) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if minimum <= value <= MAX_STORE_INT else default


def normalize_order(raw) -> str:
    if isinstance(raw, str) and raw.strip().lower() in _ASCENDING_ALIASES:
        return ASCENDING
    return DESCENDING


class UserRepository:
    def __init__(
        self,
        db: Session,
        *,
        default_limit: int = 10,
        limit_bounds: tuple[int, int] | None = None,
        clock: Callable[[], dt.datetime] = utcnow,
    ) -> None:
        self.db = db
        self.default_limit = default_limit
        self.limit_bounds = limit_bounds
        self.clock = clock

    def normalize_limit(self, raw) -> int:
        limit = _parse_int(raw, self.default_limit)
        if self.limit_bounds:
            low, high = self.limit_bounds
            limit = min(max(limit, low), high)
        return limit

    def list(self, limit=None, offset=None, order=None):
        """Page through users sorted by joined_at.

        A limit of 0 means no limit. Unparseable values fall back to the
        defaults instead of failing.
        """
        limit = self.normalize_limit(limit)
        offset = _parse_int(offset, 0)
        sort = User.joined_at.asc() if normalize_order(order) == ASCENDING else User.joined_at.desc()

        query = self.db.query(User).order_by(sort).offset(offset)
        if limit:
            query = query.limit(limit)
        try:
            return query.all()
        except OperationalError as exc:
            self._store_failed("list", exc)

    def create(self, username: str) -> User:
        user = User(username=username, joined_at=self.clock())
        self.db.add(user)
        self._commit("create", username)
        logger.info("Created user %s", user.id)
        return user

    def get_by_id(self, user_id) -> User | None:
        key = parse_user_id(user_id)
        try:
            return self.db.get(User, key)
        except OperationalError as exc:
            self._store_failed("get", exc)

    def update_by_id(self, user_id, username: str) -> User | None:
        """Overwrite the username only; id and joined_at are left alone."""
        user = self.get_by_id(user_id)
        if user is None:
            return None
        user.username = username
        self._commit("update", username)
        logger.info("Updated user %s", user.id)
        return user

    def delete_by_id(self, user_id) -> User | None:
        """Remove a user, returning its last stored contents."""
        user = self.get_by_id(user_id)
        if user is None:
            return None
        self.db.delete(user)
        self._commit("delete", user.username)
        logger.info("Deleted user %s", user.id)
        return user

    def _commit(self, operation: str, username: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Username conflict on %s: %r", operation, username)
            raise UsernameTaken() from exc
        except OperationalError as exc:
            self.db.rollback()
            self._store_failed(operation, exc)

    def _store_failed(self, operation: str, exc: Exception):
        logger.exception("Store unavailable during %s", operation)
        raise Unavailable() from exc
