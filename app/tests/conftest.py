import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

from infrastructure.configuration import Settings  # noqa: E402
from infrastructure.configuration.infrastructure import ServerSettings  # noqa: E402
from infrastructure.configuration.integrations import (  # noqa: E402
    AwsSettings,
    IdentitySettings,
    MailSettings,
)
from infrastructure.notifications.senders.base import Sender  # noqa: E402
from infrastructure.templates.stores.base import TemplateStore  # noqa: E402
from tests.factories.notifications import (  # noqa: E402
    make_classification,
    make_info,
    make_notification,
    make_request,
    make_template,
)


@pytest.fixture
def info_factory():
    """Factory for Info instances."""
    return make_info


@pytest.fixture
def request_factory():
    """Factory for CreateNotificationRequest instances."""
    return make_request


@pytest.fixture
def notification_factory():
    """Factory for single-send Notification instances."""
    return make_notification


@pytest.fixture
def template_factory():
    """Factory for EmailTemplate instances."""
    return make_template


@pytest.fixture
def classification_factory():
    """Factory for ClassificationLang instances built from (sub, lang) pairs."""
    return make_classification


@pytest.fixture
def mock_sender():
    """Sender mock returning sequential message ids."""
    sender = MagicMock(spec=Sender)
    sender.provider_name = "mock"
    sender.send.side_effect = lambda n: f"msg-{n.recipients[0].sub}"
    return sender


@pytest.fixture
def mock_resolver():
    """IdentityResolver mock; set sub_to_info.return_value in tests."""
    return MagicMock()


@pytest.fixture
def mock_template_store():
    return MagicMock(spec=TemplateStore)


@pytest.fixture
def settings_factory():
    """Build Settings without reading the process environment for sections.

    Example:
        settings = settings_factory(mail={"MAIL_PROVIDER": "smtp"})
    """

    def _factory(identity=None, mail=None, aws=None, server=None, **kwargs):
        return Settings(
            identity=IdentitySettings(**(identity or {})),
            mail=MailSettings(**(mail or {})),
            aws=AwsSettings(**(aws or {})),
            server=ServerSettings(**(server or {})),
            **kwargs,
        )

    return _factory
