"""Application feature flags – FeatureFlag value object and the flag catalog."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """Describes a feature flag with metadata.

    ``default_value`` is only used for the zero-value document served before a
    tenant has ever saved its flags.
    """
    key: str
    description: str = ""
    default_value: bool = False


ADDONS = FeatureFlag("addons", "Addons (master)", default_value=True)
EMAIL_TEMPLATES = FeatureFlag("email_templates", "Email templates")
DISCORD_INTEGRATION = FeatureFlag("discord_integration", "Discord integration")
TUTORIALS = FeatureFlag("tutorials", "Tutorials")
ANNOUNCEMENTS = FeatureFlag("announcements", "Announcements")

DEFAULT_CATALOG: tuple[FeatureFlag, ...] = (
    ADDONS,
    EMAIL_TEMPLATES,
    DISCORD_INTEGRATION,
    TUTORIALS,
    ANNOUNCEMENTS,
)


__all__ = [
    "ADDONS",
    "ANNOUNCEMENTS",
    "DEFAULT_CATALOG",
    "DISCORD_INTEGRATION",
    "EMAIL_TEMPLATES",
    "TUTORIALS",
    "FeatureFlag",
]
