from typing import Optional

from sqlmodel import Field, SQLModel


class Customer(SQLModel, table=True):
    # The table name is part of the "UNIQUE constraint failed: customer.email"
    # text that the constraint translator parses.
    __tablename__ = "customer"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, nullable=False)
    surname: str = Field(max_length=50, nullable=False)
    email: str = Field(max_length=254, nullable=False, unique=True, index=True)
    birthdate: str = Field(max_length=10, nullable=False)  # YYYY-MM-DD
