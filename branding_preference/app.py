import json
import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from .core.config import Config
from .core.constants import ORGANIZATION_TYPE, ErrorMessages
from .core.exceptions import BrandingPreferenceMgtException
from .core.middleware import branding_exception_handler, global_exception_handler
from .core.models import BrandingPreference
from .core.preference_utils import (
    get_formatted_locale,
    handle_client_exception,
    handle_server_exception,
    is_valid_json_string,
)

logger = logging.getLogger(__name__)


class PreferenceCheckRequest(BaseModel):
    """A branding preference as submitted by a tenant, preference as raw JSON."""

    type: str = ORGANIZATION_TYPE
    name: str
    locale: Optional[str] = None
    preference: str


app = FastAPI(title="Branding Preference Management")
app.add_exception_handler(BrandingPreferenceMgtException, branding_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)


@app.post("/branding-preference/check")
async def check_branding_preference(request: PreferenceCheckRequest):
    """Validate a submitted preference and report its locale and published state.

    - Rejects preferences that are not a non-empty JSON object (400)
    - Rejects unsupported preference types (400)
    - Reports a malformed ``configs`` section as a build failure (500)
    """
    if not is_valid_json_string(request.preference):
        raise handle_client_exception(ErrorMessages.ERROR_CODE_INVALID_BRANDING_PREFERENCE, request.name)

    branding = BrandingPreference(
        type=request.type,
        name=request.name,
        locale=get_formatted_locale(request.locale or Config.DEFAULT_LOCALE),
        preference=json.loads(request.preference),
    )
    try:
        published = branding.is_published
    except TypeError as e:
        raise handle_server_exception(
            ErrorMessages.ERROR_CODE_ERROR_BUILDING_BRANDING_PREFERENCE, request.name, cause=e
        )

    logger.info(f"Checked {branding.type} branding preference for {branding.name} ({branding.locale})")
    return {
        "type": branding.type,
        "name": branding.name,
        "locale": branding.locale,
        "published": published,
    }


@app.get("/health")
async def health_check():
    """Report whether the service configuration is usable."""
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy", "environment": Config.ENVIRONMENT, "default_locale": Config.DEFAULT_LOCALE}
