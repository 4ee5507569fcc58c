import base64

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from infrastructure.notifications.header import NOTIFY_HEADER

router = APIRouter(prefix="/test", tags=["Test"])


@router.post("/header2post")
async def header_to_post(request: Request):
    """Echo the raw request body, base64 encoded, in the X-Notify header.

    Used to exercise gateways that turn a header into a POST body.
    """
    body = await request.body()
    return JSONResponse(
        content={"message": "success"},
        headers={NOTIFY_HEADER: base64.b64encode(body).decode("ascii")},
    )
