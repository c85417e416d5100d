"""Domain model - keyed entities kept in repositories.

Every entity is a frozen Pydantic dataclass with a read-only ``id``:
- Fields are validated at construction and cannot be reassigned afterwards
- Warehouse items carry a mutable quantity, changed only through ``set_quantity``
- No dependencies on the adapters or the demos
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Protocol, TypeVar

from pydantic import Field
from pydantic.dataclasses import dataclass

from recordkeeper.domain.errors import ValidationError


K_co = TypeVar("K_co", covariant=True)


class Keyed(Protocol[K_co]):
    """Capability contract for repository entities: a read-only key."""

    @property
    def id(self) -> K_co: ...


class QuantityTracked(Protocol):
    """Entities whose stock level can be updated in place."""

    @property
    def quantity(self) -> int: ...

    def set_quantity(self, value: int) -> None: ...


def _check_quantity(entity_type: str, key: object, value: int) -> None:
    if value < 0:
        raise ValidationError("Quantity cannot be negative!", entity_type=entity_type, key=key)


# Inventory


@dataclass(frozen=True)
class InventoryItem:
    """Immutable inventory record persisted to the inventory file."""

    id: int
    name: Annotated[str, Field(min_length=1)]
    quantity: Annotated[int, Field(ge=0)]
    date_added: datetime

    def __str__(self) -> str:
        return f"InventoryItem(id={self.id}, name={self.name}, quantity={self.quantity})"


# Warehouse


@dataclass(frozen=True)
class ElectronicItem:
    """Electronic stock line. Quantity is the only field that changes."""

    id: int
    name: Annotated[str, Field(min_length=1)]
    quantity: Annotated[int, Field(ge=0)]
    brand: Annotated[str, Field(min_length=1)]
    warranty_months: Annotated[int, Field(ge=0)]

    def set_quantity(self, value: int) -> None:
        _check_quantity(type(self).__name__, self.id, value)
        object.__setattr__(self, "quantity", value)

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, {self.name} ({self.brand}), "
            f"Qty: {self.quantity}, Warranty: {self.warranty_months} months"
        )


@dataclass(frozen=True)
class GroceryItem:
    """Perishable stock line with an expiry date."""

    id: int
    name: Annotated[str, Field(min_length=1)]
    quantity: Annotated[int, Field(ge=0)]
    expiry_date: date

    def set_quantity(self, value: int) -> None:
        _check_quantity(type(self).__name__, self.id, value)
        object.__setattr__(self, "quantity", value)

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __str__(self) -> str:
        return f"[Grocery] ID: {self.id}, {self.name}, Qty: {self.quantity}, Expires: {self.expiry_date:%Y-%m-%d}"


# Clinic


@dataclass(frozen=True)
class Patient:
    id: int
    name: Annotated[str, Field(min_length=1)]
    age: Annotated[int, Field(ge=0)]
    gender: str

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: Annotated[str, Field(min_length=1)]
    date_issued: date

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Patient ID: {self.patient_id}, "
            f"Medication: {self.medication_name}, Date: {self.date_issued:%Y-%m-%d}"
        )
