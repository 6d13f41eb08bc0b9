import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.data_access.constraint_translator import classify_engine_message, translate_write_errors
from app.data_access.models import Customer
from app.domain.errors import ConstraintViolationError, NotNullViolation, UniqueViolation


# --- 1. Classifying engine text ---

def test_unique_failure_is_classified_with_value_from_payload() -> None:
    violation = classify_engine_message(
        "UNIQUE constraint failed: customer.email", {"email": "taken@example.com"}
    )

    assert violation == UniqueViolation(entity="customer", field="email", value="taken@example.com")
    assert violation.message == "There is another customer with email set to taken@example.com"


def test_not_null_failure_is_classified() -> None:
    violation = classify_engine_message("NOT NULL constraint failed: customer.surname", {"surname": None})

    assert violation == NotNullViolation(field="surname")
    assert violation.message == "surname cannot be null"


def test_driver_prefix_does_not_hide_the_marker() -> None:
    message = "(sqlite3.IntegrityError) UNIQUE constraint failed: customer.email\n[SQL: INSERT ...]"

    assert isinstance(classify_engine_message(message, {}), UniqueViolation)


@pytest.mark.parametrize(
    "message",
    [
        "FOREIGN KEY constraint failed",
        "CHECK constraint failed: customer.name",
        "database is locked",
        "",
    ],
)
def test_other_engine_text_is_not_classified(message: str) -> None:
    assert classify_engine_message(message, {"name": "x"}) is None


# --- 2. Translating real SQLite failures ---

def _customer(email: str, **overrides: str) -> Customer:
    data = {"name": "Ada", "surname": "Lovelace", "email": email, "birthdate": "1815-12-10"}
    data.update(overrides)
    return Customer(**data)


def test_duplicate_email_raises_unique_violation(session: Session) -> None:
    session.add(_customer("ada@example.com"))
    session.commit()

    payload = {"email": "ada@example.com"}
    session.add(_customer("ada@example.com", name="Other"))
    with pytest.raises(ConstraintViolationError) as exc_info:
        with translate_write_errors(session, payload):
            session.commit()

    assert exc_info.value.violation == UniqueViolation(
        entity="customer", field="email", value="ada@example.com"
    )
    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_null_column_raises_not_null_violation(session: Session) -> None:
    customer = _customer("grace@example.com")
    session.add(customer)
    session.commit()

    customer.name = None
    session.add(customer)
    with pytest.raises(ConstraintViolationError) as exc_info:
        with translate_write_errors(session, {"name": None}):
            session.commit()

    assert exc_info.value.violation == NotNullViolation(field="name")


def test_session_is_usable_after_translated_failure(session: Session) -> None:
    session.add(_customer("ada@example.com"))
    session.commit()

    session.add(_customer("ada@example.com"))
    with pytest.raises(ConstraintViolationError):
        with translate_write_errors(session, {}):
            session.commit()

    lin = _customer("lin@example.com")
    session.add(lin)
    session.commit()
    session.refresh(lin)
    assert lin.id is not None


def test_unclassified_integrity_error_is_reraised_unchanged(session: Session) -> None:
    error = IntegrityError("INSERT ...", {}, Exception("FOREIGN KEY constraint failed"))

    with pytest.raises(IntegrityError) as exc_info:
        with translate_write_errors(session, {}):
            raise error

    assert exc_info.value is error


def test_other_errors_pass_through(session: Session) -> None:
    with pytest.raises(ValueError):
        with translate_write_errors(session, {}):
            raise ValueError("not a write failure")
