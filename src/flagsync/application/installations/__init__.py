"""Application installations – tenant registry, metadata and Discord configuration."""
from flagsync.application.installations.discord import DiscordConfig, DiscordConfigService
from flagsync.application.installations.meta import InstallationMeta, InstallationMetaService
from flagsync.application.installations.registry import InstallationRegistry

__all__ = [
    "DiscordConfig",
    "DiscordConfigService",
    "InstallationMeta",
    "InstallationMetaService",
    "InstallationRegistry",
]
