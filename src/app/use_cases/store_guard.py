"""
Store error translation for use cases.

Database failures are not retried: they come back as a Result error so the
router can answer 503 instead of crashing the request.
"""

import functools
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.libs.result import Error, Return

logger = logging.getLogger(__name__)

# Unique constraints whose violation has a dedicated error code. Matched on
# the constraint name (PostgreSQL) or the column list (SQLite) in the message.
UNIQUE_CONFLICTS = (
    (
        ("ix_users_email", "users.email"),
        Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists"),
    ),
    (
        ("idx_group_member_unique", "group_members.group_id"),
        Error("MEMBERSHIP_ALREADY_EXISTS", "Member already belongs to this group"),
    ),
)


def integrity_error(exc: IntegrityError) -> Error:
    """Error for an integrity violation, specific when the constraint is known"""
    detail = str(exc.orig)
    for markers, error in UNIQUE_CONFLICTS:
        if any(marker in detail for marker in markers):
            return Error(error.code, error.message, reason=detail)
    return Error(
        "INTEGRITY_CONFLICT",
        "The change conflicts with existing data",
        reason=detail,
    )


def store_guard(func):
    """Wrap an async `execute` so store exceptions become Result errors"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except IntegrityError as exc:
            logger.warning(f"Integrity conflict in {func.__qualname__}: {exc.orig}")
            return Return.err(integrity_error(exc))
        except SQLAlchemyError as exc:
            logger.error(f"Store failure in {func.__qualname__}: {exc}")
            return Return.err(
                Error(
                    "STORE_UNAVAILABLE",
                    "The backing store is unavailable",
                    reason=type(exc).__name__,
                )
            )

    return wrapper
