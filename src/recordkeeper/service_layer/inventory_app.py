"""Inventory demo: seed records, persist them, reload them in a new session."""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
from pathlib import Path
from typing import TextIO

from recordkeeper.adapters.json_file_store import JsonFileStore
from recordkeeper.adapters.repository import KeyedRepository
from recordkeeper.domain.errors import CorruptDataError, RepositoryError
from recordkeeper.domain.model import InventoryItem


logger = logging.getLogger(__name__)

# (id, name, quantity, days before now)
SAMPLE_ITEMS: tuple[tuple[int, str, int, int], ...] = (
    (1, "Laptop", 15, 10),
    (2, "Monitor", 25, 5),
    (3, "Keyboard", 50, 2),
    (4, "Mouse", 60, 0),
    (5, "Headphones", 30, 1),
)


class InventoryApp:
    """One inventory session bound to a snapshot file."""

    def __init__(self, file_path: Path, out: TextIO, *, store: JsonFileStore[InventoryItem] | None = None) -> None:
        self.file_path = Path(file_path)
        self.out = out
        self.store = store or JsonFileStore(InventoryItem)
        self.items: KeyedRepository[int, InventoryItem] = KeyedRepository("Item")

    def seed_sample_data(self, now: datetime | None = None) -> None:
        print("\nSeeding sample data...", file=self.out)
        now = now or datetime.now()
        try:
            for item_id, name, quantity, days_ago in SAMPLE_ITEMS:
                item = InventoryItem(id=item_id, name=name, quantity=quantity, date_added=now - timedelta(days=days_ago))
                self.items.add(item)
                print(f"Added item: {item}", file=self.out)
        except RepositoryError as exc:
            print(f"Error seeding data: {exc}", file=self.out)

    def save_data(self) -> None:
        print("\nSaving data to file...", file=self.out)
        self.store.save(self.items.list(), self.file_path)
        print(f"Successfully saved {self.items.count()} items to {self.file_path}", file=self.out)

    def load_data(self) -> None:
        print("\nLoading data from file...", file=self.out)
        if not self.file_path.exists():
            print(f"File not found: {self.file_path}", file=self.out)
            return
        loaded = self.store.load(self.file_path)
        self.items.restore(loaded)
        print(f"Successfully loaded {len(loaded)} items from {self.file_path}", file=self.out)

    def print_all_items(self) -> None:
        print("\nCurrent Inventory:", file=self.out)
        print("------------------", file=self.out)

        items = self.items.list()
        if not items:
            print("No items in inventory", file=self.out)
            return

        for item in items:
            print(
                f"ID: {item.id}, Name: {item.name}, Qty: {item.quantity}, Added: {item.date_added:%Y-%m-%d}",
                file=self.out,
            )


def run(file_path: Path, out: TextIO, *, now: datetime | None = None) -> None:
    """Seed and save in one session, then reload and print in a fresh one."""
    print("Inventory Management System", file=out)
    print("===========================", file=out)

    try:
        app = InventoryApp(file_path, out)
        app.seed_sample_data(now)
        app.save_data()

        print("\nSimulating new session...", file=out)
        new_app = InventoryApp(file_path, out)
        new_app.load_data()
        new_app.print_all_items()
    except (OSError, CorruptDataError, RepositoryError) as exc:
        logger.error("Inventory demo failed: %s", exc)
        print(f"Fatal error: {exc}", file=out)
