"""Domain layer - entities, value objects and the error taxonomy.

Contains no infrastructure: nothing here touches files, logging handlers or the
console. Repositories and file stores live in ``recordkeeper.adapters``.
"""

from recordkeeper.domain.errors import (
    CorruptDataError,
    DuplicateKeyError,
    InvalidScoreFormatError,
    MissingFieldError,
    NotFoundError,
    RecordkeeperError,
    RepositoryError,
    ScoreFileError,
    ScoreRangeError,
    ValidationError,
)
from recordkeeper.domain.finance import (
    Account,
    AccountKind,
    ProcessorKind,
    Transaction,
    TransactionOutcome,
    apply_transaction,
    describe_processing,
)
from recordkeeper.domain.grading import Grade, Student, classify
from recordkeeper.domain.model import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Keyed,
    Patient,
    Prescription,
    QuantityTracked,
)


__all__ = [
    "Account",
    "AccountKind",
    "CorruptDataError",
    "DuplicateKeyError",
    "ElectronicItem",
    "Grade",
    "GroceryItem",
    "InvalidScoreFormatError",
    "InventoryItem",
    "Keyed",
    "MissingFieldError",
    "NotFoundError",
    "Patient",
    "Prescription",
    "ProcessorKind",
    "QuantityTracked",
    "RecordkeeperError",
    "RepositoryError",
    "ScoreFileError",
    "ScoreRangeError",
    "Student",
    "Transaction",
    "TransactionOutcome",
    "ValidationError",
    "apply_transaction",
    "classify",
    "describe_processing",
]
