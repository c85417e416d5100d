"""recordkeeper: keyed in-memory repositories, JSON snapshots and console demos."""

__version__ = "0.1.0"
