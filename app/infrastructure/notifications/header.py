"""Notification header helper for upstream services.

A service that wants an email sent after handling a request builds a
``NotifyMessage`` and writes it onto its response. A gateway then turns the
header into a ``POST /notification`` body: the decoded JSON has the same
``event``, ``data``, ``from`` and ``to`` fields as the request.

Usage:
    message = NotifyMessage("welcome", from_id=user_id, to_id=friend_id,
                            data={"name": "John"}, user_trans=lookup_subs)
    message.add_to(other_friend_id)
    message.write_to_header(response)
"""

import base64
import json
from typing import Callable, Dict, List, Mapping, Optional

from fastapi import Response

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import (
    ConfigurationError,
    ResolutionError,
    SenderNotFoundError,
)

logger = get_module_logger()

NOTIFY_HEADER = "X-Notify"

# Maps local user ids to identity service subs. Unknown ids are left out.
UserTrans = Callable[[List[str]], Mapping[str, str]]


class NotifyMessage:
    """Pending notification for one sender and a de-duplicated recipient list."""

    def __init__(
        self,
        event: str,
        from_id: str,
        to_id: str,
        data: Optional[Dict[str, str]],
        user_trans: Optional[UserTrans],
    ):
        if user_trans is None:
            raise ConfigurationError("user_trans is required")
        self.event = event
        self.from_id = from_id
        self.to_ids: List[str] = [to_id]
        self.data = dict(data or {})
        self.user_trans = user_trans

    def add_to(self, to_id: str) -> None:
        if to_id not in self.to_ids:
            self.to_ids.append(to_id)

    def payload(self) -> Dict[str, object]:
        """Translate the ids and build the notification body.

        Raises:
            ResolutionError: If the translation fails.
            SenderNotFoundError: If the sender has no identity.
        """
        try:
            subs = self.user_trans([*self.to_ids, self.from_id])
        except Exception as e:
            logger.error("notify_user_trans_failed", event=self.event, error=str(e))
            raise ResolutionError(f"failed to find user source id: {e}") from e

        if self.from_id not in subs:
            raise SenderNotFoundError(self.from_id)

        return {
            "event": self.event,
            "data": self.data,
            "from": subs[self.from_id],
            "to": [subs[to_id] for to_id in self.to_ids if to_id in subs],
        }

    def encode(self) -> str:
        body = json.dumps(self.payload(), separators=(",", ":"), ensure_ascii=False)
        return base64.b64encode(body.encode("utf-8")).decode("ascii")

    def write_to_header(self, response: Response, header_key: str = NOTIFY_HEADER) -> None:
        response.headers[header_key] = self.encode()
