"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
database lookup so callers can pick a response without inspecting
exceptions.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Backend failure (database error, closed reader)
        PERMANENT_ERROR: Input the operation can never accept (bad IP syntax)
        NOT_FOUND: The database holds no record for the input
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
