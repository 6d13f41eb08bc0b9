from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    STRING = "string"
    INT = "int"
    DATE = "date"  # YYYY-MM-DD string, checked against the calendar


class FieldFormat(str, Enum):
    EMAIL = "email"


class ConstraintKind(str, Enum):
    """Names of the individual rules a field can break, in evaluation order."""
    IS_DEFINED = "isDefined"
    IS_NOT_EMPTY = "isNotEmpty"
    IS_STRING = "isString"
    IS_INT = "isInt"
    MAX_LENGTH = "maxLength"
    IS_EMAIL = "isEmail"
    IS_VALID_DATE = "isValidDate"


class FieldRule(BaseModel):
    """Declarative rule set for a single payload field.

    Attributes:
        field (str): Name of the property in the inbound payload.
        required (bool): Whether the field must be present, non-null and non-empty.
        kind (FieldKind): Expected value type.
        max_length (Optional[int]): Upper bound on string length.
        format (Optional[FieldFormat]): Shape the string must have (e.g. email).
    """

    model_config = ConfigDict(frozen=True)

    field: str
    required: bool = True
    kind: FieldKind = FieldKind.STRING
    max_length: Optional[int] = Field(default=None, gt=0)
    format: Optional[FieldFormat] = None


# Declaration order is the order of the messages returned to the client
CUSTOMER_RULES: tuple[FieldRule, ...] = (
    FieldRule(field="name", max_length=50),
    FieldRule(field="surname", max_length=50),
    FieldRule(field="email", max_length=254, format=FieldFormat.EMAIL),
    FieldRule(field="birthdate", kind=FieldKind.DATE),
)
