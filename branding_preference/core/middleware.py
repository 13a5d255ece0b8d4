import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .exceptions import BrandingPreferenceMgtClientException, BrandingPreferenceMgtException


logger = logging.getLogger(__name__)


async def branding_exception_handler(request: Request, exc: BrandingPreferenceMgtException):
    """Translate branding faults into a ``{"code", "message"}`` body.

    Client faults map to 400, everything else to 500.
    """
    if isinstance(exc, BrandingPreferenceMgtClientException):
        logger.debug(f"Client error in {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"code": exc.code, "message": exc.message})

    logger.error(f"Server error in {request.method} {request.url.path}: {exc}", exc_info=exc.cause)
    return JSONResponse(status_code=500, content={"code": exc.code, "message": exc.message})


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
