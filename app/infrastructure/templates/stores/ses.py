"""AWS SES v2 template store."""

from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import (
    TemplateNotFoundError,
    TemplateStoreError,
    ValidationError,
)
from infrastructure.operations import aws_error_code
from infrastructure.templates.models import (
    EmailTemplate,
    TemplatePage,
    TemplateSummary,
    split_template_name,
)
from infrastructure.templates.stores.base import TemplateStore

logger = get_module_logger()

PAGE_SIZE = 100
NOT_FOUND_CODES = ("NotFoundException",)


class SesTemplateStore(TemplateStore):
    """Templates stored as SES v2 email templates.

    Args:
        client: A boto3 ``sesv2`` client.
        page_size: Page size used when listing templates.
    """

    def __init__(self, client: Any, page_size: int = PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    def is_template_exist(self, name: str) -> bool:
        try:
            self.client.get_email_template(TemplateName=name)
        except ClientError as e:
            if aws_error_code(e) in NOT_FOUND_CODES:
                return False
            raise self._store_error("get_email_template", name, e) from e
        except BotoCoreError as e:
            raise self._store_error("get_email_template", name, e) from e
        return True

    def get_template(self, name: str) -> EmailTemplate:
        try:
            response = self.client.get_email_template(TemplateName=name)
        except ClientError as e:
            if aws_error_code(e) in NOT_FOUND_CODES:
                raise TemplateNotFoundError(name) from e
            raise self._store_error("get_email_template", name, e) from e
        except BotoCoreError as e:
            raise self._store_error("get_email_template", name, e) from e

        content = response.get("TemplateContent", {})
        template_name = response.get("TemplateName", name)
        try:
            event, lang = split_template_name(template_name)
        except ValidationError:
            event, lang = template_name, ""
        return EmailTemplate(
            event=event,
            lang=lang,
            subject=content.get("Subject", ""),
            html=content.get("Html", ""),
            text=content.get("Text", ""),
        )

    def create_template(self, template: EmailTemplate) -> None:
        self._call(
            "create_email_template",
            template.name,
            TemplateName=template.name,
            TemplateContent=self._content(template),
        )
        logger.info("ses_template_created", template=template.name)

    def update_template(self, template: EmailTemplate) -> None:
        self._call(
            "update_email_template",
            template.name,
            TemplateName=template.name,
            TemplateContent=self._content(template),
        )
        logger.info("ses_template_updated", template=template.name)

    def delete_template(self, name: str) -> None:
        try:
            self.client.delete_email_template(TemplateName=name)
        except ClientError as e:
            if aws_error_code(e) in NOT_FOUND_CODES:
                raise TemplateNotFoundError(name) from e
            raise self._store_error("delete_email_template", name, e) from e
        except BotoCoreError as e:
            raise self._store_error("delete_email_template", name, e) from e
        logger.info("ses_template_deleted", template=name)

    def list_templates(self, next_token: Optional[str] = None) -> TemplatePage:
        kwargs: Dict[str, Any] = {"PageSize": self.page_size}
        if next_token:
            kwargs["NextToken"] = next_token
        response = self._call("list_email_templates", "", **kwargs)

        return TemplatePage(
            templates=[
                TemplateSummary(
                    name=item["TemplateName"],
                    created_at=item.get("CreatedTimestamp"),
                )
                for item in response.get("TemplatesMetadata", [])
            ],
            next_token=response.get("NextToken"),
        )

    @staticmethod
    def _content(template: EmailTemplate) -> Dict[str, str]:
        return {
            "Subject": template.subject,
            "Html": template.html,
            "Text": template.text,
        }

    def _call(self, method: str, name: str, **kwargs) -> Dict[str, Any]:
        try:
            return getattr(self.client, method)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise self._store_error(method, name, e) from e

    @staticmethod
    def _store_error(method: str, name: str, exc: Exception) -> TemplateStoreError:
        logger.error(
            "ses_template_store_failed",
            method=method,
            template=name,
            error_code=aws_error_code(exc),
            error=str(exc),
        )
        return TemplateStoreError(f"ses {method} failed: {exc}")
