"""Adapters layer - repositories and file stores."""

from recordkeeper.adapters.json_file_store import JsonFileStore
from recordkeeper.adapters.repository import AbstractRepository, KeyedRepository, StockRepository


__all__ = ["AbstractRepository", "JsonFileStore", "KeyedRepository", "StockRepository"]
