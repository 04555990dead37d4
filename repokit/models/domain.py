"""Domain entities."""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$"


class Customer(BaseModel):
    """
    Registered customer.

    Validation runs on construction: id and name must be non-blank and
    email must look like local@domain. A failing check raises
    pydantic.ValidationError (a ValueError) and no instance is created.
    Instances are immutable.
    """
    id: str
    name: str
    email: str = Field(..., pattern=EMAIL_PATTERN)

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("id", "name")
    @classmethod
    def check_not_blank(cls, value: str, info) -> str:
        if not value.strip():
            raise ValueError(f"Customer {info.field_name} cannot be blank")
        return value


@dataclass
class CityCustomer:
    """Customer located in a city, identified by its numeric id.

    Fields are optional so a partially filled instance can serve as a
    filter template (see CustomerFilter).
    """
    id: Optional[int]
    name: Optional[str] = field(default=None, compare=False)
    city: Optional[str] = field(default=None, compare=False)

    def __hash__(self) -> int:
        return hash(self.id)
