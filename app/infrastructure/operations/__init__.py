"""Operation result types and status enums.

Standardized result types for lookups across the service, including the
status enum, the result dataclass, and the classifier for geolocation
database exceptions.
"""

from infrastructure.operations.classifiers import classify_geoip_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_geoip_error",
]
