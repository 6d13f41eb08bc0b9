from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from sqlmodel import Session

# Error translation for storage constraint violations
from app.api.error_mappers import WRITE_ERROR_MAPPERS, run_with_error_mappers

# Layer 4: Data Access (Session)
from app.data_access.database import get_session

# Layer 3: Domain Entities (Pydantic models)
from app.domain import CustomerDomain

# Layer 2: Services
from app.services.customer_service import CustomerService


router = APIRouter(prefix="/customers", tags=["Customers"])

# Bodies are taken as raw JSON objects so the customer rule table, not
# FastAPI's model validation, decides what is accepted.
Payload = Annotated[dict[str, Any], Body()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: Payload,
    session: Annotated[Session, Depends(get_session)]
) -> CustomerDomain:
    """Full CRUD: Validates and persists a single customer."""
    service = CustomerService(session)
    return run_with_error_mappers(lambda: service.create_customer(payload), WRITE_ERROR_MAPPERS)

@router.get("")
def get_all_customers(
    session: Annotated[Session, Depends(get_session)]
) -> list[CustomerDomain]:
    """Full CRUD: Retrieves all customers."""
    service = CustomerService(session)
    return service.get_all_customers()

@router.get("/{id}")
def get_customer(
    id: int,
    session: Annotated[Session, Depends(get_session)]
) -> CustomerDomain:
    """Full CRUD: Retrieves a single customer by primary key ID."""
    service = CustomerService(session)
    return service.get_customer_by_id(id)

@router.put("/{id}")
def replace_customer(
    id: int,
    payload: Payload,
    session: Annotated[Session, Depends(get_session)]
) -> CustomerDomain:
    """Full CRUD: Replaces all data of an existing customer."""
    service = CustomerService(session)
    return run_with_error_mappers(lambda: service.replace_customer(id, payload), WRITE_ERROR_MAPPERS)

@router.patch("/{id}")
def update_customer(
    id: int,
    payload: Payload,
    session: Annotated[Session, Depends(get_session)]
) -> CustomerDomain:
    """Full CRUD: Updates only the fields present in the payload."""
    service = CustomerService(session)
    return run_with_error_mappers(lambda: service.update_customer(id, payload), WRITE_ERROR_MAPPERS)

@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    id: int,
    session: Annotated[Session, Depends(get_session)]
) -> None:
    """Full CRUD: Removes a customer from the database."""
    service = CustomerService(session)
    service.delete_customer(id)
    return None
