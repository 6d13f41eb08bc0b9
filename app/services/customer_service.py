import logging
from collections.abc import Mapping
from typing import Any, List

from fastapi import HTTPException, status
from sqlmodel import Session, select

# Layer 4: Data Access
from app.data_access.constraint_translator import translate_write_errors
from app.data_access.models import Customer

# Layer 3: Domain Entities
from app.domain.constraints import CUSTOMER_RULES
from app.domain.customer import CustomerDomain
from app.domain.validation import build_messages, validate_payload


logger = logging.getLogger(__name__)

class CustomerService:
    """
    Service layer for managing Customer-related business logic and database operations.

    This service acts as the intermediary between the API routes (Layer 1) and
    the Data Access layer (Layer 4). Payloads are checked against the customer
    rule table before any write; uniqueness and NOT NULL are left to the
    storage constraints, whose failures are translated at the commit.
    """

    def __init__(self, session: Session):
        """
        Initializes the CustomerService with a database session.

        Args:
            session (Session): The active SQLModel/SQLAlchemy session.
        """
        self.session = session

    def _map_to_domain(self, db_customer: Customer) -> CustomerDomain:
        return CustomerDomain.model_validate(db_customer)

    def _validate_or_400(self, payload: Mapping[str, Any], partial: bool = False) -> None:
        """
        Runs the customer rule table and rejects the request on any failure.

        Raises:
            HTTPException: 400 status code with one message per failing field.
        """
        failures = validate_payload(payload, CUSTOMER_RULES, partial=partial)
        if failures:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=build_messages(failures)
            )

    def _get_customer_or_404(self, customer_id: int) -> Customer:
        """
        Internal helper to retrieve a customer database record or raise a 404 error.

        Args:
            customer_id (int): The primary key ID of the customer to find.

        Returns:
            Customer: The database record found.

        Raises:
            HTTPException: 404 status code if the customer does not exist.
        """
        customer = self.session.get(Customer, customer_id)
        if not customer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Could not find a customer with id: {customer_id}"
            )
        return customer

    def _apply(self, db_customer: Customer, payload: Mapping[str, Any], partial: bool) -> None:
        # Only schema fields are copied; "id" and unknown keys are ignored.
        for rule in CUSTOMER_RULES:
            if partial and rule.field not in payload:
                continue
            setattr(db_customer, rule.field, payload.get(rule.field))

    def _save(self, db_customer: Customer, payload: Mapping[str, Any]) -> Customer:
        self.session.add(db_customer)
        with translate_write_errors(self.session, payload):
            self.session.commit()
        self.session.refresh(db_customer)
        return db_customer

    def create_customer(self, payload: Mapping[str, Any]) -> CustomerDomain:
        """
        Validates and persists a single new customer to the database.

        Email uniqueness is not pre-checked: the insert is always attempted
        and a storage rejection is raised as ConstraintViolationError.

        Args:
            payload (Mapping[str, Any]): The raw request body.

        Returns:
            CustomerDomain: The newly created customer, including its id.

        Raises:
            HTTPException: 400 status code if the payload breaks a field rule.
            ConstraintViolationError: if the storage rejects the insert.
        """
        self._validate_or_400(payload)

        db_customer = Customer()
        self._apply(db_customer, payload, partial=False)
        db_customer = self._save(db_customer, payload)
        logger.info(f"Customer {db_customer.id} created.")
        return self._map_to_domain(db_customer)

    def get_all_customers(self) -> List[CustomerDomain]:
        """
        Retrieves all customer records.

        Returns:
            List[CustomerDomain]: Every stored customer, ordered by id.
        """
        statement = select(Customer).order_by(Customer.id)
        return [self._map_to_domain(c) for c in self.session.exec(statement).all()]

    def get_customer_by_id(self, customer_id: int) -> CustomerDomain:
        """
        Retrieves a single customer by their database ID.

        Raises:
            HTTPException: 404 status code if the customer is not found.
        """
        return self._map_to_domain(self._get_customer_or_404(customer_id))

    def replace_customer(self, customer_id: int, payload: Mapping[str, Any]) -> CustomerDomain:
        """
        Replaces every field of an existing customer (PUT semantics).

        Args:
            customer_id (int): The ID of the customer to replace.
            payload (Mapping[str, Any]): The complete new customer data.

        Returns:
            CustomerDomain: The replaced customer with the same id.

        Raises:
            HTTPException: 400 if the payload is invalid, 404 if the customer does not exist.
            ConstraintViolationError: if the storage rejects the update.
        """
        self._validate_or_400(payload)
        db_customer = self._get_customer_or_404(customer_id)

        self._apply(db_customer, payload, partial=False)
        db_customer = self._save(db_customer, payload)
        logger.info(f"Customer {customer_id} replaced.")
        return self._map_to_domain(db_customer)

    def update_customer(self, customer_id: int, payload: Mapping[str, Any]) -> CustomerDomain:
        """
        Updates only the fields present in the payload (PATCH semantics).

        Omitted fields keep their stored value. An explicit null is written
        through, so the NOT NULL column rejects it.

        Args:
            customer_id (int): The ID of the customer to update.
            payload (Mapping[str, Any]): The fields to change.

        Returns:
            CustomerDomain: The updated customer.

        Raises:
            HTTPException: 400 if a present field is invalid, 404 if the customer does not exist.
            ConstraintViolationError: if the storage rejects the update.
        """
        self._validate_or_400(payload, partial=True)
        db_customer = self._get_customer_or_404(customer_id)

        self._apply(db_customer, payload, partial=True)
        db_customer = self._save(db_customer, payload)
        logger.info(f"Customer {customer_id} updated.")
        return self._map_to_domain(db_customer)

    def delete_customer(self, customer_id: int) -> None:
        """
        Removes a customer record from the database.

        Raises:
            HTTPException: 404 status code if the customer does not exist.
        """
        db_customer = self._get_customer_or_404(customer_id)
        try:
            self.session.delete(db_customer)
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.error(f"Failed to delete customer {customer_id}: {e}")
            raise
        logger.info(f"Customer {customer_id} deleted.")
