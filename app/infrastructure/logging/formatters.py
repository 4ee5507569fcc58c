"""Custom structlog processors."""

from typing import Any


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that adds application name/version to log entries."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


# Key fragments whose values never reach the logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "authorization",
        "credential",
        "cookie",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks values of sensitive-looking keys.

    Matching is a case-insensitive substring match of the key against
    SENSITIVE_PATTERNS (plus `additional_patterns`). Nested dicts are
    masked one level deep.

    Example:
        processor = mask_sensitive_data()
        processor(None, "info", {"smtp_password": "x"})
        # {"smtp_password": "***REDACTED***"}
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def _is_sensitive(key: str) -> bool:
        key_lower = key.lower()
        return any(pattern in key_lower for pattern in patterns)

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in list(event_dict.items()):
            if isinstance(value, dict):
                event_dict[key] = {
                    k: (mask_value if _is_sensitive(str(k)) and v is not None else v)
                    for k, v in value.items()
                }
            elif _is_sensitive(key) and value is not None:
                event_dict[key] = mask_value
        return event_dict

    return processor
