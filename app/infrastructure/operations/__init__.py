"""Operation result types and status enums.

Standardized result types for calls to external collaborators, plus error
classifiers for AWS SDK and HTTP client exceptions.
"""

from infrastructure.operations.classifiers import (
    aws_error_code,
    classify_aws_error,
    classify_http_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "aws_error_code",
    "classify_aws_error",
    "classify_http_error",
]
