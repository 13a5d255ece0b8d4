from enum import Enum


CONFIGS = "configs"
IS_BRANDING_ENABLED = "isBrandingEnabled"

RESOURCE_NAME_SEPARATOR = "_"
LOCAL_CODE_SEPARATOR = "-"
DEFAULT_LOCALE = "en-US"

ORGANIZATION_TYPE = "ORG"
APPLICATION_TYPE = "APP"
CUSTOM_TYPE = "CUSTOM"
PREFERENCE_TYPES = (ORGANIZATION_TYPE, APPLICATION_TYPE, CUSTOM_TYPE)


class ErrorMessages(Enum):
    """Catalog of branding preference errors.

    Each member's value is a ``(code, message)`` pair. Messages may carry
    positional ``%s`` placeholders filled in by the exception factories.
    """

    # Client errors
    ERROR_CODE_INVALID_BRANDING_PREFERENCE = (
        "BPM-60001",
        "Invalid branding preference configurations for tenant: %s.",
    )
    ERROR_CODE_BRANDING_PREFERENCE_NOT_EXISTS = (
        "BPM-60002",
        "Branding preferences are not configured for tenant: %s.",
    )
    ERROR_CODE_BRANDING_PREFERENCE_ALREADY_EXISTS = (
        "BPM-60003",
        "Branding preference already exists for tenant: %s.",
    )
    ERROR_CODE_UNSUPPORTED_PREFERENCE_TYPE = (
        "BPM-60004",
        "Unsupported branding preference type: %s.",
    )

    # Server errors
    ERROR_CODE_ERROR_GETTING_BRANDING_PREFERENCE = (
        "BPM-65001",
        "Error while getting branding preference configurations for tenant: %s.",
    )
    ERROR_CODE_ERROR_ADDING_BRANDING_PREFERENCE = (
        "BPM-65002",
        "Unable to add branding preference for tenant: %s.",
    )
    ERROR_CODE_ERROR_DELETING_BRANDING_PREFERENCE = (
        "BPM-65003",
        "Error while deleting branding preference configuration for tenant: %s.",
    )
    ERROR_CODE_ERROR_BUILDING_BRANDING_PREFERENCE = (
        "BPM-65004",
        "Error while building branding preference for tenant: %s.",
    )
    ERROR_CODE_ERROR_CHECKING_BRANDING_PREFERENCE_EXISTS = (
        "BPM-65005",
        "Error while checking branding preference existence.",
    )

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]
