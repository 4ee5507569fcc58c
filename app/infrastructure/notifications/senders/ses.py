"""AWS SES v2 sender."""

import json
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import SendError, TemplateNotFoundError
from infrastructure.notifications.models import Notification
from infrastructure.notifications.senders.base import Sender
from infrastructure.operations import classify_aws_error
from infrastructure.templates.stores.base import TemplateStore

logger = get_module_logger()


class SesSender(Sender):
    """Send templated emails with the SES v2 ``SendEmail`` API.

    The template is rendered by SES from the stored template and the
    notification data serialized as JSON.
    """

    def __init__(self, client: Any, store: TemplateStore, from_address: str):
        self.client = client
        self.store = store
        self.from_address = from_address

    @property
    def provider_name(self) -> str:
        return "aws"

    def send(self, notification: Notification) -> str:
        template_name = notification.template_name
        if not self.store.is_template_exist(template_name):
            raise TemplateNotFoundError(template_name)

        try:
            response = self.client.send_email(
                FromEmailAddress=self.from_address,
                Destination={
                    "ToAddresses": [r.email for r in notification.recipients]
                },
                Content={
                    "Template": {
                        "TemplateName": template_name,
                        "TemplateData": json.dumps(notification.data),
                    }
                },
            )
        except (ClientError, BotoCoreError) as e:
            result = classify_aws_error(e)
            logger.error(
                "ses_send_failed",
                template=template_name,
                error=str(e),
                error_code=result.error_code,
            )
            raise SendError(f"failed to send email: {e}") from e

        message_id = response.get("MessageId")
        if not message_id:
            raise SendError("failed to send email: no message id returned")

        logger.debug("ses_email_sent", template=template_name, message_id=message_id)
        return message_id
