"""Identity resolution against the identity service admin API.

All dependencies are injected via constructor - no global state.
"""

from typing import List, Optional

import requests

from infrastructure.identity.models import ClassificationLang, IdentityRecord
from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import (
    ConfigurationError,
    ResolutionError,
    SenderNotFoundError,
)
from infrastructure.operations import (
    OperationResult,
    OperationStatus,
    classify_http_error,
)

logger = get_module_logger()

IDENTITIES_PATH = "/admin/identities"
HEALTH_READY_PATH = "/admin/health/ready"


class IdentityResolver:
    """Resolve subject ids into contact data grouped by language.

    Example:
        resolver = IdentityResolver("http://kratos-admin:4434")
        classification = resolver.sub_to_info("sender-id", ["u1", "u2"])
        for lang in classification.langs:
            for info in classification.infos(lang):
                ...
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        page_size: int = 100,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ConfigurationError("identity service url is not configured")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.session = session or requests.Session()

    def fetch_identities(self, ids: List[str]) -> List[IdentityRecord]:
        """Fetch identity records for the given ids in one batched call.

        Raises:
            ResolutionError: On transport failure, non-2xx status or an
                undecodable body.
        """
        log = logger.bind(ids_count=len(ids))
        try:
            response = self.session.get(
                self.base_url + IDENTITIES_PATH,
                params={"ids": ids, "page_size": self.page_size},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            result = classify_http_error(e)
            log.error(
                "identity_fetch_failed",
                error=str(e),
                error_code=result.error_code,
            )
            raise ResolutionError(f"failed to fetch identities: {e}") from e
        except ValueError as e:
            log.error("identity_decode_failed", error=str(e))
            raise ResolutionError(f"failed to decode identities: {e}") from e

        if not isinstance(payload, list):
            log.error("identity_decode_failed", error="response is not a list")
            raise ResolutionError("failed to decode identities: response is not a list")

        try:
            return [IdentityRecord.model_validate(item) for item in payload]
        except ValueError as e:
            log.error("identity_decode_failed", error=str(e))
            raise ResolutionError(f"failed to decode identities: {e}") from e

    def sub_to_info(
        self, from_id: str, to_ids: List[str]
    ) -> Optional[ClassificationLang]:
        """Resolve the sender and recipients of a notification.

        Returns:
            None when ``to_ids`` is empty (no call is made), otherwise the
            recipients grouped by language. Recipients absent from the
            identity service are dropped.

        Raises:
            ResolutionError: When the identity service call fails.
            SenderNotFoundError: When the sender is absent from the response.
        """
        if not to_ids:
            return None

        records = self.fetch_identities(list(to_ids) + [from_id])
        classification = ClassificationLang.from_records(from_id, records)
        if classification is None:
            logger.warning("identity_sender_not_found", sender=from_id)
            raise SenderNotFoundError(from_id)

        logger.info(
            "identities_resolved",
            requested=len(to_ids),
            resolved=classification.recipient_count(),
            langs=classification.langs,
        )
        return classification

    def is_ready(self) -> OperationResult:
        """Probe the identity service readiness endpoint."""
        try:
            response = self.session.get(
                self.base_url + HEALTH_READY_PATH, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning("identity_health_check_failed", error=str(e))
            return classify_http_error(e)

        if response.status_code == 200:
            return OperationResult.success(message="identity service ready")

        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message=f"status code {response.status_code}",
            error_code="NOT_READY",
        )
