from pydantic import BaseModel, Field


class CustomerDomain(BaseModel):
    """
    The pure domain representation of a stored Customer.

    Inbound payloads are checked by the rule table in
    ``app.domain.constraints`` rather than by this model, so it only
    describes what the API returns.

    Attributes:
        id (int): Identifier assigned by storage, immutable after creation.
        name (str): Given name of the customer.
        surname (str): Family name of the customer.
        email (str): Email address, unique across all customers.
        birthdate (str): Date of birth in YYYY-MM-DD format.
    """

    id: int = Field(..., description="Identifier assigned on creation", gt=0)
    name: str = Field(..., description="Given name of the customer", max_length=50)
    surname: str = Field(..., description="Family name of the customer", max_length=50)
    email: str = Field(..., description="The unique email address of the customer", max_length=254)
    birthdate: str = Field(..., description="Date of birth in YYYY-MM-DD format")

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "name": "John",
                "surname": "Doe",
                "email": "john.doe@example.com",
                "birthdate": "1990-05-17"
            }
        }
    }
