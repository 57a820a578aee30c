"""Application feature flags – catalog, documents, manager and provider."""
from flagsync.application.feature_flags.document import FeatureFlagDocument, truthy
from flagsync.application.feature_flags.feature_flag import (
    ADDONS,
    ANNOUNCEMENTS,
    DEFAULT_CATALOG,
    DISCORD_INTEGRATION,
    EMAIL_TEMPLATES,
    TUTORIALS,
    FeatureFlag,
)
from flagsync.application.feature_flags.manager import MAX_HISTORY, FlagDocumentManager
from flagsync.application.feature_flags.provider import FeatureFlagProvider, StoreFeatureFlagProvider

__all__ = [
    "ADDONS",
    "ANNOUNCEMENTS",
    "DEFAULT_CATALOG",
    "DISCORD_INTEGRATION",
    "EMAIL_TEMPLATES",
    "MAX_HISTORY",
    "TUTORIALS",
    "FeatureFlag",
    "FeatureFlagDocument",
    "FeatureFlagProvider",
    "FlagDocumentManager",
    "StoreFeatureFlagProvider",
    "truthy",
]
