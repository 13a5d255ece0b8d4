"""Helpers for validating and inspecting branding preferences."""

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from .constants import (
    CONFIGS,
    IS_BRANDING_ENABLED,
    LOCAL_CODE_SEPARATOR,
    RESOURCE_NAME_SEPARATOR,
    ErrorMessages,
)
from .exceptions import BrandingPreferenceMgtClientException, BrandingPreferenceMgtServerException

if TYPE_CHECKING:
    from .models import BrandingPreference


logger = logging.getLogger(__name__)


def is_valid_json_string(string_json: Optional[str]) -> bool:
    """Return True if the string is a JSON object with at least one key."""
    if not string_json or not string_json.strip():
        return False
    try:
        object_json = json.loads(string_json, object_pairs_hook=_reject_duplicate_keys)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Invalid json string. Error occurred while validating preference string: {e}")
        return False
    if not isinstance(object_json, dict):
        logger.debug("Invalid json string. Preference string is not a JSON object")
        return False
    return len(object_json) > 0


def handle_client_exception(
    error: ErrorMessages,
    *data: str,
    cause: Optional[BaseException] = None,
) -> BrandingPreferenceMgtClientException:
    """Build a client exception from a catalog entry.

    Args:
        error: Catalog entry supplying the code and message template
        *data: Values substituted positionally into the template
        cause: Underlying exception to chain, if any

    Returns:
        The exception; raising it is left to the caller.
    """
    message = _populate_message_with_data(error, data)
    return BrandingPreferenceMgtClientException(message, error.code, cause)


def handle_server_exception(
    error: ErrorMessages,
    *data: str,
    cause: Optional[BaseException] = None,
) -> BrandingPreferenceMgtServerException:
    """Build a server exception from a catalog entry. See handle_client_exception."""
    message = _populate_message_with_data(error, data)
    return BrandingPreferenceMgtServerException(message, error.code, cause)


def get_formatted_locale(locale: Optional[str]) -> Optional[str]:
    """Replace '_' with '-' so both en_US and en-US style codes are supported."""
    if not locale or not locale.strip():
        return locale
    return locale.replace(RESOURCE_NAME_SEPARATOR, LOCAL_CODE_SEPARATOR)


def is_branding_published(branding_preference: Union[Mapping, "BrandingPreference"]) -> bool:
    """Check whether branding is enabled in the given preference document.

    Accepts the preference document itself or a BrandingPreference wrapping it.

    Raises:
        TypeError: If ``configs`` is present but is not a JSON object
    """
    if isinstance(branding_preference, Mapping):
        preferences = branding_preference
    else:
        preferences = branding_preference.preference

    # Branding is enabled by default when configs.isBrandingEnabled is missing.
    # A null configs value counts as missing.
    configs = preferences.get(CONFIGS)
    if configs is None:
        return True
    if not isinstance(configs, Mapping):
        raise TypeError(f"Preference '{CONFIGS}' is not a JSON object: {type(configs).__name__}")
    return _opt_boolean(configs, IS_BRANDING_ENABLED, True)


def _opt_boolean(values: Mapping, key: str, default: bool) -> bool:
    value: Any = values.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return default


def _reject_duplicate_keys(pairs) -> dict:
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"Duplicate key {key!r}")
        result[key] = value
    return result


def _populate_message_with_data(error: ErrorMessages, data) -> str:
    if not data:
        return error.message
    # Surplus values are ignored, as printf-style formatting does.
    placeholders = error.message.count("%s")
    return error.message % tuple(data[:placeholders])
