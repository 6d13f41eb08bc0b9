from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class UniqueViolation(BaseModel):
    """A write tried to store a value already used by another record."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unique_violation"] = "unique_violation"
    entity: str
    field: str
    value: Any = None

    @property
    def message(self) -> str:
        return f"There is another {self.entity} with {self.field} set to {self.value}"


class NotNullViolation(BaseModel):
    """A write tried to store no value in a column declared NOT NULL."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_null_violation"] = "not_null_violation"
    field: str

    @property
    def message(self) -> str:
        return f"{self.field} cannot be null"


DomainError = Annotated[Union[UniqueViolation, NotNullViolation], Field(discriminator="kind")]


class ConstraintViolationError(Exception):
    """Carries a storage-originated DomainError up to the HTTP error mappers."""

    def __init__(self, violation: DomainError) -> None:
        super().__init__(violation.message)
        self.violation = violation
