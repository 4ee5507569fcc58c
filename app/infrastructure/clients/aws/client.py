"""Base AWS client utilities.

Provides `get_boto3_client` and `get_ses_client`. This module avoids reading
settings at import time and accepts configuration via parameters.
"""

from typing import Any, Dict, Optional

import boto3  # type: ignore
import botocore.session  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ProfileNotFound  # type: ignore

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import ConfigurationError

logger = get_module_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    credentials_file: Optional[str] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'sesv2')
        session_config: Optional boto3 session kwargs (e.g., region_name, profile_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        credentials_file: Optional path of a shared credentials file

    Returns:
        botocore client instance

    Raises:
        ConfigurationError: If the profile or credentials cannot be loaded.
    """
    session_config = session_config or {}
    client_config = client_config or {}

    try:
        if credentials_file:
            core_session = botocore.session.Session()
            core_session.set_config_variable("credentials_file", credentials_file)
            session = boto3.Session(botocore_session=core_session, **session_config)
        else:
            session = boto3.Session(**session_config)
        return session.client(service_name, **client_config)
    except (ProfileNotFound, BotoCoreError) as e:
        logger.error(
            "aws_client_creation_failed", service=service_name, error=str(e)
        )
        raise ConfigurationError(f"failed to create {service_name} client: {e}") from e


def get_ses_client(aws_settings) -> BaseClient:
    """Create an SES v2 client from the AWS settings section."""
    session_config: Dict[str, Any] = {"region_name": aws_settings.AWS_REGION}
    if aws_settings.PROFILE:
        session_config["profile_name"] = aws_settings.PROFILE

    client_config: Dict[str, Any] = {}
    if aws_settings.ENDPOINT_URL:
        client_config["endpoint_url"] = aws_settings.ENDPOINT_URL

    return get_boto3_client(
        "sesv2",
        session_config=session_config,
        client_config=client_config,
        credentials_file=aws_settings.CREDENTIALS_FILE or None,
    )
