import logging
import re
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.domain.errors import ConstraintViolationError, DomainError, NotNullViolation, UniqueViolation


logger = logging.getLogger(__name__)

# SQLite reports constraint failures as e.g. "UNIQUE constraint failed: customer.email".
# Another engine needs its own patterns derived from its actual messages.
_UNIQUE_MARKER = "UNIQUE constraint failed"
_NOT_NULL_MARKER = "NOT NULL constraint failed"
_QUALIFIED_COLUMN = re.compile(r"constraint failed: (?P<entity>\w+)\.(?P<field>\w+)")


def engine_message(error: IntegrityError) -> str:
    """Returns the raw driver text wrapped by a SQLAlchemy error."""
    return str(error.orig) if error.orig is not None else str(error)


def classify_engine_message(message: str, payload: Mapping[str, Any]) -> Optional[DomainError]:
    """Maps storage-engine constraint text onto a typed DomainError.

    Args:
        message (str): The diagnostic reported by the storage engine.
        payload (Mapping[str, Any]): The request payload that caused the write,
            used to recover the offending value.

    Returns:
        Optional[DomainError]: The matching violation, or None if the text
        is not a recognised constraint failure.
    """
    column = _QUALIFIED_COLUMN.search(message)
    if column is None:
        return None

    entity, field = column.group("entity"), column.group("field")
    if _UNIQUE_MARKER in message:
        return UniqueViolation(entity=entity, field=field, value=payload.get(field))
    if _NOT_NULL_MARKER in message:
        return NotNullViolation(field=field)
    return None


@contextmanager
def translate_write_errors(session: Session, payload: Mapping[str, Any]) -> Generator[None, None, None]:
    """Wraps a commit so constraint failures surface as ConstraintViolationError.

    The session is rolled back on any integrity failure. Failures the
    classifier does not recognise are re-raised unchanged.
    """
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        violation = classify_engine_message(engine_message(e), payload)
        if violation is None:
            raise
        logger.warning(f"Write rejected by storage constraint: {violation.message}")
        raise ConstraintViolationError(violation) from e
