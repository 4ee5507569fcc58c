"""Error classifiers for provider exceptions.

Converts AWS SDK and HTTP client exceptions into standardized
OperationResult objects so that health probes and template store calls
report failures in one shape.

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        client.list_email_templates(PageSize=1)
    except (BotoCoreError, ClientError) as exc:
        return classify_aws_error(exc)
"""

from botocore.exceptions import ClientError
import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def aws_error_code(exc: Exception) -> str:
    """Extract the AWS error code from a botocore ClientError, or "Unknown"."""
    response = getattr(exc, "response", None) or {}
    return response.get("Error", {}).get("Code", "Unknown")


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - ThrottlingException / TooManyRequestsException: TRANSIENT_ERROR
    - AccessDeniedException: UNAUTHORIZED
    - NotFoundException / ResourceNotFoundException: NOT_FOUND
    - BadRequestException / ValidationException: PERMANENT_ERROR
    - Other ClientError: TRANSIENT_ERROR (AWS convention)
    - Non-ClientError (BotoCoreError, credentials): TRANSIENT_ERROR

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with status, message and error_code
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = aws_error_code(exc)

    if error_code in ("ThrottlingException", "TooManyRequestsException"):
        return OperationResult.transient_error(
            "AWS API throttled", error_code="RATE_LIMITED"
        )

    if error_code == "AccessDeniedException":
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "AWS API access denied",
            error_code="FORBIDDEN",
        )

    if error_code in ("NotFoundException", "ResourceNotFoundException"):
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "AWS resource not found",
            error_code="NOT_FOUND",
        )

    if error_code in (
        "ValidationException",
        "BadRequestException",
        "InvalidParameterException",
    ):
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}",
            error_code="INVALID_REQUEST",
        )

    return OperationResult.transient_error(
        f"AWS client error: {error_code}",
        error_code="AWS_CLIENT_ERROR",
    )


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify `requests` exceptions into OperationResult.

    Status Code Mapping:
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 5xx: TRANSIENT_ERROR
    - Other 4xx: PERMANENT_ERROR
    - Timeouts and connection errors: TRANSIENT_ERROR
    - Anything else (decode errors, ...): PERMANENT_ERROR
    """
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status_code = exc.response.status_code
        if status_code in (401, 403):
            return OperationResult.error(
                OperationStatus.UNAUTHORIZED,
                f"HTTP {status_code}: {str(exc)}",
                error_code="UNAUTHORIZED",
            )
        if status_code == 404:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                f"HTTP 404: {str(exc)}",
                error_code="NOT_FOUND",
            )
        if 500 <= status_code < 600:
            return OperationResult.transient_error(
                f"HTTP {status_code}: {str(exc)}", error_code="SERVER_ERROR"
            )
        return OperationResult.permanent_error(
            f"HTTP {status_code}: {str(exc)}", error_code="HTTP_ERROR"
        )

    if isinstance(exc, (requests.Timeout, requests.ConnectionError)):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    return OperationResult.permanent_error(
        f"Request failed: {type(exc).__name__}: {str(exc)}",
        error_code="REQUEST_FAILED",
    )
