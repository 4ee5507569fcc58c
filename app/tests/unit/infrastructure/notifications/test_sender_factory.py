"""Unit tests for build_sender and build_template_store."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.notifications.exceptions import ConfigurationError
from infrastructure.notifications.senders import SesSender, SmtpSender, build_sender
from infrastructure.templates.factory import build_template_store
from infrastructure.templates.stores import FileTemplateStore, SesTemplateStore


@pytest.mark.unit
class TestBuildSender:
    def test_unknown_provider(self, settings_factory):
        settings = settings_factory(mail={"MAIL_PROVIDER": "pigeon"})

        with pytest.raises(ConfigurationError, match="unsupported mail provider"):
            build_sender(settings)

    def test_provider_tag_is_case_insensitive(self, settings_factory):
        settings = settings_factory(mail={"MAIL_PROVIDER": " AWS "})

        assert settings.mail.MAIL_PROVIDER == "aws"

    @patch("infrastructure.notifications.senders.factory.get_ses_client")
    def test_aws(self, mock_get_client, settings_factory):
        settings = settings_factory(
            mail={"MAIL_PROVIDER": "aws"},
            aws={"AWS_SES_FROM": "noreply@example.com"},
        )

        sender = build_sender(settings)

        assert isinstance(sender, SesSender)
        assert sender.from_address == "noreply@example.com"
        assert isinstance(sender.store, SesTemplateStore)
        mock_get_client.assert_called_once_with(settings.aws)

    @patch("infrastructure.notifications.senders.factory.get_ses_client")
    def test_aws_requires_from(self, mock_get_client, settings_factory):
        settings = settings_factory(mail={"MAIL_PROVIDER": "aws"}, aws={"AWS_SES_FROM": ""})

        with pytest.raises(ConfigurationError, match="AWS_SES_FROM"):
            build_sender(settings)

    def test_smtp(self, settings_factory, tmp_path):
        settings = settings_factory(
            mail={
                "MAIL_PROVIDER": "smtp",
                "MAIL_SMTP_URL": "smtp://u:p@mail.example.com:587",
                "MAIL_FROM": "noreply@example.com",
                "MAIL_TEMPLATE_DIR": str(tmp_path),
            }
        )

        sender = build_sender(settings)

        assert isinstance(sender, SmtpSender)
        assert sender.config.host == "mail.example.com"
        assert isinstance(sender.store, FileTemplateStore)

    def test_smtp_uses_given_store(self, settings_factory):
        store = MagicMock()
        settings = settings_factory(
            mail={
                "MAIL_PROVIDER": "smtp",
                "MAIL_SMTP_URL": "smtp://mail.example.com:25",
                "MAIL_FROM": "noreply@example.com",
            }
        )

        assert build_sender(settings, store=store).store is store

    def test_smtp_requires_template_dir(self, settings_factory):
        settings = settings_factory(
            mail={
                "MAIL_PROVIDER": "smtp",
                "MAIL_SMTP_URL": "smtp://mail.example.com:25",
                "MAIL_FROM": "noreply@example.com",
            }
        )

        with pytest.raises(ConfigurationError, match="MAIL_TEMPLATE_DIR"):
            build_sender(settings)


@pytest.mark.unit
class TestBuildTemplateStore:
    @patch("infrastructure.templates.factory.get_ses_client")
    def test_aws(self, mock_get_client, settings_factory):
        store = build_template_store(settings_factory(mail={"MAIL_PROVIDER": "aws"}))

        assert isinstance(store, SesTemplateStore)
        assert store.client is mock_get_client.return_value

    def test_smtp(self, settings_factory, tmp_path):
        settings = settings_factory(
            mail={"MAIL_PROVIDER": "smtp", "MAIL_TEMPLATE_DIR": str(tmp_path)}
        )

        store = build_template_store(settings)

        assert isinstance(store, FileTemplateStore)
        assert store.directory == tmp_path

    def test_unknown(self, settings_factory):
        with pytest.raises(ConfigurationError):
            build_template_store(settings_factory(mail={"MAIL_PROVIDER": "x"}))
