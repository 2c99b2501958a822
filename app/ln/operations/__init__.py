"""Operation result types and status enums."""

from ln.operations.result import OperationResult
from ln.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
