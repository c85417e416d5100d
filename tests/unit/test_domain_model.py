"""Unit tests for domain entities and the error taxonomy."""

import dataclasses
from datetime import date, datetime

from pydantic import ValidationError as PydanticValidationError
import pytest

from recordkeeper.domain import (
    DuplicateKeyError,
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    NotFoundError,
    Patient,
    Prescription,
    RepositoryError,
    ValidationError,
)


pytestmark = pytest.mark.unit


class TestInventoryItem:
    """Test the immutable inventory record."""

    def test_creates_valid_item(self):
        item = InventoryItem(id=1, name="Laptop", quantity=15, date_added=datetime(2024, 3, 5))
        assert item.id == 1
        assert item.date_added.year == 2024

    def test_is_immutable(self):
        """Test fields cannot be reassigned."""
        item = InventoryItem(id=1, name="Laptop", quantity=15, date_added=datetime(2024, 3, 5))
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.quantity = 3  # type: ignore[misc]

    def test_rejects_negative_quantity(self):
        with pytest.raises(PydanticValidationError):
            InventoryItem(id=1, name="Laptop", quantity=-1, date_added=datetime(2024, 3, 5))

    def test_rejects_empty_name(self):
        with pytest.raises(PydanticValidationError):
            InventoryItem(id=1, name="", quantity=1, date_added=datetime(2024, 3, 5))


class TestWarehouseItems:
    """Test stock items and their quantity updates."""

    def test_set_quantity_mutates_in_place(self):
        item = ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24)
        item.set_quantity(45)
        assert item.quantity == 45

    def test_other_fields_stay_frozen(self):
        item = ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.brand = "Apple"  # type: ignore[misc]

    def test_set_negative_quantity_rejected(self):
        item = GroceryItem(id=101, name="Milk", quantity=100, expiry_date=date(2024, 3, 22))
        with pytest.raises(ValidationError) as exc_info:
            item.set_quantity(-5)
        assert exc_info.value.key == 101
        assert item.quantity == 100

    def test_hash_is_stable_across_quantity_updates(self):
        item = ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24)
        before = hash(item)
        item.set_quantity(45)

        assert hash(item) == before
        assert item in {item}

    def test_electronic_str(self):
        item = ElectronicItem(id=2, name="Laptop", quantity=30, brand="Dell", warranty_months=36)
        assert str(item) == "[Electronic] ID: 2, Laptop (Dell), Qty: 30, Warranty: 36 months"

    def test_grocery_str(self):
        item = GroceryItem(id=102, name="Bread", quantity=150, expiry_date=date(2024, 3, 18))
        assert str(item) == "[Grocery] ID: 102, Bread, Qty: 150, Expires: 2024-03-18"


class TestClinicEntities:
    def test_patient_str(self):
        patient = Patient(id=2, name="Jane Smith", age=32, gender="Female")
        assert str(patient) == "ID: 2, Name: Jane Smith, Age: 32, Gender: Female"

    def test_prescription_str(self):
        prescription = Prescription(id=103, patient_id=2, medication_name="Lisinopril", date_issued=date(2024, 3, 5))
        assert str(prescription) == "ID: 103, Patient ID: 2, Medication: Lisinopril, Date: 2024-03-05"

    def test_patient_rejects_negative_age(self):
        with pytest.raises(PydanticValidationError):
            Patient(id=1, name="John Doe", age=-1, gender="Male")


class TestErrors:
    """Test the error taxonomy."""

    def test_repository_errors_share_a_base(self):
        assert issubclass(DuplicateKeyError, RepositoryError)
        assert issubclass(NotFoundError, RepositoryError)
        assert issubclass(ValidationError, RepositoryError)
        assert issubclass(ValidationError, ValueError)

    def test_messages_name_the_key(self):
        assert str(DuplicateKeyError("Item", 1)) == "Item with ID 1 already exists"
        assert str(NotFoundError("Item", 99)) == "Item with ID 99 not found"
