# 1. Standard Library
from typing import Any

# 2. Third-Party Libraries
import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

# 3. Application Layers
from app.services.customer_service import CustomerService


def customer_payload() -> dict[str, Any]:
    return {
        "name": "Grace",
        "surname": "Hopper",
        "email": "grace@example.com",
        "birthdate": "1906-12-09",
    }


def test_delete_removes_customer(session: Session) -> None:
    service = CustomerService(session)
    created = service.create_customer(customer_payload())

    service.delete_customer(created.id)

    with pytest.raises(HTTPException) as exc_info:
        service.get_customer_by_id(created.id)
    assert exc_info.value.status_code == 404


def test_failed_delete_is_rolled_back(session: Session, monkeypatch: pytest.MonkeyPatch) -> None:
    """A commit failure during delete rolls the session back and propagates."""
    service = CustomerService(session)
    created = service.create_customer(customer_payload())

    rollbacks = []
    real_rollback = session.rollback

    def failing_commit() -> None:
        raise OperationalError("DELETE FROM customer ...", {}, Exception("database is locked"))

    def recording_rollback() -> None:
        rollbacks.append(True)
        real_rollback()

    monkeypatch.setattr(session, "commit", failing_commit)
    monkeypatch.setattr(session, "rollback", recording_rollback)

    with pytest.raises(OperationalError):
        service.delete_customer(created.id)

    assert rollbacks == [True]
    monkeypatch.undo()
    assert service.get_customer_by_id(created.id) == created
