"""
Business logic for users.

``validate_user`` checks an inbound record and ``UserService`` ties the
validator, the ticket calculator and the record store together.  The
store is injected so that each application instance owns its own
collection.
"""

import logging
import re
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from ..core.exceptions import (
    DecodeError,
    DuplicateIdentifier,
    InvalidAge,
    InvalidIdentifier,
    InvalidPassport,
    InvalidPathParameter,
    NotFound,
)
from ..core.store import RecordStore
from ..schemas.user import INT64_MAX, INT64_MIN, UserCreate, UserRead
from .ticket_service import calculate_ticket

logger = logging.getLogger(__name__)

PASSPORT_LENGTH = 9
# \Z rather than $ so a trailing newline does not match.
PASSPORT_RE = re.compile(r"^[0-9]+\Z")
USER_ID_RE = re.compile(r"^[+-]?[0-9]+\Z")


def is_valid_passport(passport_number: str) -> bool:
    return len(passport_number) == PASSPORT_LENGTH and PASSPORT_RE.match(passport_number) is not None


def summarize_errors(exc: ValidationError) -> str:
    """Collapse pydantic errors into a single line for the response body."""
    parts = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            parts.append("invalid JSON")
            continue
        loc = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return f"{DecodeError.message}: {'; '.join(parts)}"


def decode_user(body: bytes) -> UserCreate:
    """Parse a request body as JSON whatever its declared content type."""
    try:
        return UserCreate.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(summarize_errors(e))


def validate_user(data: UserCreate, store: RecordStore) -> None:
    """Check ``data`` before it is stored.

    Checks run in a fixed order and the first failure is raised:
    identifier, age, passport number, then uniqueness of the identifier.
    Name and surname are accepted as they are.
    """
    if data.id <= 0:
        raise InvalidIdentifier()
    if data.age <= 0:
        raise InvalidAge()
    if not is_valid_passport(data.passport_number):
        raise InvalidPassport()
    if store.contains(data.id):
        raise DuplicateIdentifier()


def parse_user_id(raw: str) -> int:
    """Parse a path segment into a user id, raising ``InvalidPathParameter``."""
    if USER_ID_RE.match(raw) is None:
        raise InvalidPathParameter()
    user_id = int(raw)
    if not INT64_MIN <= user_id <= INT64_MAX:
        raise InvalidPathParameter()
    return user_id


class UserService:
    """Operations on the user collection."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_user(self, data: UserCreate, today: Optional[date] = None) -> UserRead:
        """Validate ``data``, attach a ticket and store the result.

        The store lock is held from validation to insertion so that two
        concurrent requests with the same id cannot both succeed.
        """
        with self.store.lock:
            validate_user(data, self.store)
            ticket = calculate_ticket(data.age, today)
            user = UserRead(
                **data.model_dump(),
                date_of_ticket_expiry=ticket.expires_at,
                price=ticket.price,
            )
            self.store.put(user.id, user)
        logger.info("Created user %s, ticket expires %s", user.id, ticket.expires_at.date())
        return user

    async def list_users(self) -> List[UserRead]:
        return self.store.list()

    async def get_user(self, user_id: int) -> UserRead:
        """Return the user with ``user_id`` or raise ``NotFound``."""
        user = self.store.get(user_id)
        if user is None:
            raise NotFound()
        return user
