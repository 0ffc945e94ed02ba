"""User service — account lifecycle, ownership checks and last-login bookkeeping.

Every public operation runs as one transaction (``repo.atomic()``) and takes
the authenticated caller's id explicitly. Ownership is checked before
existence, so a non-owner asking for a missing id gets ``ForbiddenException``
rather than ``EntityNotFoundException``.
"""

import uuid
from datetime import datetime
from typing import Callable, FrozenSet, Union

import pytz
import structlog

from accounts.application.services.auth_service import hash_password, issue_token
from accounts.application.services.phone_mapper import to_phones
from accounts.config import get_settings
from accounts.core.exceptions import (
    DuplicateEmailException,
    EntityNotFoundException,
    ForbiddenException,
)
from accounts.domain.models.user import User
from accounts.domain.repositories.user_repository import UserRepository
from accounts.domain.schemas.user import UserCreate, UserPatch, UserRead, UserUpdate

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = frozenset({"name", "email", "password", "phones"})
REPLACED_FIELDS = frozenset({"name", "email", "password"})


def get_current_time() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(tz)


def ensure_owner(caller_id: uuid.UUID, user_id: uuid.UUID) -> None:
    """Callers may only modify their own account."""
    if caller_id != user_id:
        raise ForbiddenException(
            "You are not allowed to modify this resource",
            details={"user_id": str(user_id)},
        )


def _get_or_404(repo: UserRepository, user_id: uuid.UUID) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", details={"user_id": str(user_id)})
    return user


def _ensure_email_available(repo: UserRepository, user: User, email: str) -> None:
    # Keeping one's own email is not a conflict
    if email != user.email and repo.exists_by_email(email):
        raise DuplicateEmailException("Email is already registered by another user")


def _apply_changes(
    repo: UserRepository,
    user: User,
    body: Union[UserUpdate, UserPatch],
    fields: FrozenSet[str],
) -> User:
    """Copy the named fields from the request onto the user.

    Shared by full and partial update; `fields` says which ones the request
    carries. A phone list, when present, replaces the stored one entirely.
    """
    if "name" in fields:
        user.name = body.name
    if "email" in fields:
        _ensure_email_available(repo, user, body.email)
        user.email = body.email
    if "password" in fields:
        user.password = hash_password(body.password)
    if "phones" in fields:
        user.phones = to_phones(body.phones, user)

    user.modified = get_current_time()
    return user


def record_last_login(repo: UserRepository, user_id: uuid.UUID) -> bool:
    """Best-effort refresh of `last_login`.

    Returns False instead of raising when the user does not exist, so the
    enclosing operation is never aborted by it.
    """
    user = repo.get_by_id(user_id)
    if user is None:
        logger.debug("Last login not recorded, user not found", user_id=str(user_id))
        return False

    user.last_login = get_current_time()
    repo.save(user)
    return True


def create_user(
    repo: UserRepository,
    body: UserCreate,
    issue: Callable[[uuid.UUID], str] = issue_token,
) -> UserRead:
    """Register a user and mint its token.

    Two steps in one transaction: the row is saved first to obtain its id,
    then finalized with a token issued for that id.
    """
    with repo.atomic():
        if repo.exists_by_email(body.email):
            raise DuplicateEmailException("Email is already registered")

        # Step 1: reserve the identity
        user = User(name=body.name, email=body.email, password=hash_password(body.password))
        user.phones = to_phones(body.phones, user)
        user = repo.save(user)

        # Step 2: finalize with a token bound to the persisted id
        now = get_current_time()
        user.token = issue(user.id)
        user.created = now
        user.last_login = now
        user.is_active = True
        user = repo.save(user)

        logger.info("User created", user_id=str(user.id), phones=len(user.phones))
        return UserRead.model_validate(user)


def get_user(repo: UserRepository, user_id: uuid.UUID, caller_id: uuid.UUID) -> UserRead:
    """Load a user; the caller's own last_login is refreshed, not the target's."""
    with repo.atomic():
        user = _get_or_404(repo, user_id)
        snapshot = UserRead.model_validate(user)

        _ = record_last_login(repo, caller_id)
        return snapshot


def update_user(
    repo: UserRepository,
    user_id: uuid.UUID,
    body: UserUpdate,
    caller_id: uuid.UUID,
) -> UserRead:
    """Full replace of name, email and password; phones only when supplied."""
    ensure_owner(caller_id, user_id)

    with repo.atomic():
        user = _get_or_404(repo, user_id)

        fields = REPLACED_FIELDS | ({"phones"} if body.phones is not None else frozenset())
        _apply_changes(repo, user, body, fields)
        user.last_login = user.modified

        _ = record_last_login(repo, caller_id)
        user = repo.save(user)

        logger.info("User updated", user_id=str(user.id), fields=sorted(fields))
        return UserRead.model_validate(user)


def partially_update_user(
    repo: UserRepository,
    user_id: uuid.UUID,
    body: UserPatch,
    caller_id: uuid.UUID,
) -> UserRead:
    """Apply only the fields present (and non-null) in the request."""
    ensure_owner(caller_id, user_id)

    with repo.atomic():
        user = _get_or_404(repo, user_id)

        fields = frozenset(
            name for name in body.model_fields_set & MUTABLE_FIELDS
            if getattr(body, name) is not None
        )
        _apply_changes(repo, user, body, fields)

        _ = record_last_login(repo, caller_id)
        user = repo.save(user)

        logger.info("User partially updated", user_id=str(user.id), fields=sorted(fields))
        return UserRead.model_validate(user)


def delete_user(repo: UserRepository, user_id: uuid.UUID, caller_id: uuid.UUID) -> None:
    """Hard delete; the user's phones go with it."""
    ensure_owner(caller_id, user_id)

    with repo.atomic():
        user = _get_or_404(repo, user_id)
        repo.delete(user)

    logger.info("User deleted", user_id=str(user_id))
