from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import ORGANIZATION_TYPE, PREFERENCE_TYPES, ErrorMessages
from .preference_utils import handle_client_exception, is_branding_published


@dataclass(frozen=True)
class BrandingPreference:
    """A tenant's branding preference and the document describing it.

    ``preference`` is the parsed JSON object; only its ``configs`` section is
    interpreted by this package.
    """

    type: str = ORGANIZATION_TYPE
    name: Optional[str] = None
    locale: Optional[str] = None
    preference: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.type not in PREFERENCE_TYPES:
            raise handle_client_exception(ErrorMessages.ERROR_CODE_UNSUPPORTED_PREFERENCE_TYPE, str(self.type))

    @property
    def is_published(self) -> bool:
        return is_branding_published(self.preference)
