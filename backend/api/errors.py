"""Request errors and their JSON rendering."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AnalysisRequestError(Exception):
    """Raised by route handlers; rendered as {"error": ..., "details": ...}."""

    def __init__(self, status_code: int, error: str, details: str = ""):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


async def analysis_request_error_handler(
    request: Request, exc: AnalysisRequestError
) -> JSONResponse:
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.error)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "details": exc.details},
    )
