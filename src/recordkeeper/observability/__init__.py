"""Observability module: structured logging."""

from recordkeeper.observability.logging import JsonFormatter, configure_logging


__all__ = ["JsonFormatter", "configure_logging"]
