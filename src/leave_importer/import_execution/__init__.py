"""Import execution domain exports."""

from .import_contracts import ImportOutcome, ImportRequest
from .leave_import_use_case import ImportExecutionError, execute_leave_import

__all__ = [
    "ImportRequest",
    "ImportOutcome",
    "ImportExecutionError",
    "execute_leave_import",
]
