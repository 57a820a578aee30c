"""Application bot – Discord bot assignment listing."""
from flagsync.application.bot.assignments import BotAssignment, BotAssignmentService

__all__ = ["BotAssignment", "BotAssignmentService"]
