# app/domain/__init__.py

# 1. The Customer Entity
from .customer import CustomerDomain

# 2. Constraint Schema
from .constraints import CUSTOMER_RULES, ConstraintKind, FieldFormat, FieldKind, FieldRule

# 3. Validation
from .dates import is_valid_date
from .validation import FieldFailure, build_messages, validate_payload

# 4. Storage-originated errors
from .errors import ConstraintViolationError, DomainError, NotNullViolation, UniqueViolation


__all__ = [
    "CUSTOMER_RULES",
    "ConstraintKind",
    "ConstraintViolationError",
    "CustomerDomain",
    "DomainError",
    "FieldFailure",
    "FieldFormat",
    "FieldKind",
    "FieldRule",
    "NotNullViolation",
    "UniqueViolation",
    "build_messages",
    "is_valid_date",
    "validate_payload"
]
