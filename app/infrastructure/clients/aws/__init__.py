"""AWS client helpers.

Clients are created from explicit parameters; configuration is read by the
service providers in `infrastructure/services/`.
"""

from infrastructure.clients.aws.client import get_boto3_client, get_ses_client

__all__ = ["get_boto3_client", "get_ses_client"]
