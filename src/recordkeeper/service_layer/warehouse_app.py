"""Warehouse demo: two stock repositories and a run of failing operations."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from typing import TextIO

from recordkeeper.adapters.repository import StockRepository
from recordkeeper.domain.model import ElectronicItem, GroceryItem
from recordkeeper.service_layer.operations import OperationOutcome, run_operation


class WarehouseManager:
    """Owns the electronics and groceries repositories for one demo run."""

    def __init__(self, out: TextIO, *, today: date | None = None) -> None:
        self.out = out
        self.today = today or date.today()
        self.electronics: StockRepository[int, ElectronicItem] = StockRepository("Item")
        self.groceries: StockRepository[int, GroceryItem] = StockRepository("Item")

    def run_demo(self) -> list[OperationOutcome]:
        print("WAREHOUSE INVENTORY SYSTEM", file=self.out)
        print("===============================\n", file=self.out)

        self.seed_initial_data()
        self.print_inventory()
        return self.exercise_operations()

    def seed_initial_data(self) -> None:
        print("Seeding initial data...\n", file=self.out)

        for electronic in (
            ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24),
            ElectronicItem(id=2, name="Laptop", quantity=30, brand="Dell", warranty_months=36),
        ):
            self._add(self.electronics, electronic)

        for grocery in (
            GroceryItem(id=101, name="Milk", quantity=100, expiry_date=self.today + timedelta(days=7)),
            GroceryItem(id=102, name="Bread", quantity=150, expiry_date=self.today + timedelta(days=3)),
        ):
            self._add(self.groceries, grocery)

        print(file=self.out)

    def print_inventory(self) -> None:
        print("CURRENT INVENTORY", file=self.out)
        print("====================", file=self.out)

        print("\nElectronics:", file=self.out)
        for electronic in self.electronics.list():
            print(electronic, file=self.out)

        print("\nGroceries:", file=self.out)
        for grocery in self.groceries.list():
            print(grocery, file=self.out)

        print(file=self.out)

    def exercise_operations(self) -> list[OperationOutcome]:
        print("Testing Operations...\n", file=self.out)

        self._update(self.electronics, 1, 45)
        self._update(self.groceries, 101, 80)

        outcomes = [
            self._try(
                "Add duplicate electronic",
                lambda: self._add(
                    self.electronics,
                    ElectronicItem(id=1, name="Phone", quantity=10, brand="Apple", warranty_months=12),
                ),
            ),
            self._try("Update non-existent item", lambda: self._update(self.electronics, 99, 10)),
            self._try("Set negative quantity", lambda: self._update(self.groceries, 101, -5)),
            self._try("Remove non-existent item", lambda: self._remove(self.groceries, 999)),
        ]

        print("\nFinal Inventory Status:", file=self.out)
        self.print_inventory()
        return outcomes

    def _add(self, repository: StockRepository, item: ElectronicItem | GroceryItem) -> None:
        repository.add(item)
        print(f"Added: {item}", file=self.out)

    def _update(self, repository: StockRepository, item_id: int, quantity: int) -> None:
        item = repository.update_quantity(item_id, quantity)
        print(f"Updated {item.name} (ID: {item_id}) quantity to: {quantity}", file=self.out)

    def _remove(self, repository: StockRepository, item_id: int) -> None:
        repository.remove(item_id)
        print(f"Removed item ID: {item_id}", file=self.out)

    def _try(self, description: str, action: Callable[[], object]) -> OperationOutcome:
        print(f"\nTesting: {description}", file=self.out)
        return run_operation(description, action, self.out)


def run(out: TextIO, *, today: date | None = None) -> list[OperationOutcome]:
    outcomes = WarehouseManager(out, today=today).run_demo()
    print("\nSystem demo complete!", file=out)
    return outcomes
