"""Service layer - the five console demos and their shared operation runner."""

from recordkeeper.service_layer.operations import ErrorKind, OperationOutcome, run_operation


__all__ = ["ErrorKind", "OperationOutcome", "run_operation"]
