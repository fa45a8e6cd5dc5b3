from __future__ import annotations

from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ApplicationState(str, Enum):
    PENDING = "PENDING"
    ACTIVATED = "ACTIVATED"
    IN_REVIEW = "IN_REVIEW"
    OTHER = "OTHER"

    @property
    def description(self) -> str:
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.OTHER: "Other",
}


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    surname: str
    email: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"


class LegalEntity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    registration_number: str
    vat_number: str | None = None


class Fund(BaseModel):
    model_config = ConfigDict(frozen=True)

    fund_id: str
    name: str
    amount: Decimal
    fees: Decimal = Decimal("0")


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    funds: tuple[Fund, ...] = Field(default_factory=tuple)


class Review(BaseModel):
    """Review metadata; only ``reason`` is interpreted, the rest is passed through."""

    model_config = ConfigDict(frozen=True)

    reason: str
    reviewed_by: str | None = None
    opened_on: date_type | None = None
    notes: str | None = None


class Application(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    state: ApplicationState
    reference_number: str
    date: date_type
    person: Person | None = None
    is_legal_entity: bool = False
    legal_entity: LegalEntity | None = None
    products: tuple[Product, ...] = Field(default_factory=tuple)
    current_review: Review | None = None
