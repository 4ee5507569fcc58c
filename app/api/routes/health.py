from fastapi import APIRouter
from fastapi.responses import JSONResponse

from infrastructure.services import ReadinessCheckerDep

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/alive")
def alive():
    """Liveness probe."""
    return {"message": "I am alive"}


@router.get("/ready")
def ready(checker: ReadinessCheckerDep):
    """Readiness probe. Ready once the identity service and the email backend answered."""
    result = checker.check()
    if result.is_success:
        return {"message": result.message}
    return JSONResponse(status_code=500, content={"error": result.message})
