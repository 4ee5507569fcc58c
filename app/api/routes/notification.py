from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from infrastructure.notifications.models import (
    CreateNotificationRequest,
    DispatchStatus,
)
from infrastructure.services import NotificationDispatcherDep

logger = get_module_logger()
router = APIRouter(tags=["Notification"])


@router.post("/notification", status_code=status.HTTP_202_ACCEPTED)
def create_notification(
    body: CreateNotificationRequest,
    request: Request,
    dispatcher: NotificationDispatcherDep,
):
    """Send a templated email to every recipient of the request.

    Responds 202 when every recipient was sent to, 206 with the failed
    recipients on partial failure and 500 when every recipient failed.
    """
    result = dispatcher.create_notification(body, headers=request.headers)

    if result.status == DispatchStatus.ACCEPTED:
        return JSONResponse(
            status_code=status.HTTP_202_ACCEPTED,
            content={"results": [s.to_dict() for s in result.successes]},
        )

    if result.status == DispatchStatus.FAILED:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": result.first_error},
        )

    return JSONResponse(
        status_code=status.HTTP_206_PARTIAL_CONTENT,
        content=[f.to_dict() for f in result.failures],
    )
