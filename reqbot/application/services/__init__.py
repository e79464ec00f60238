"""Service orchestrators."""

from .chat_service import ChatService
from .report_service import ReportService

__all__ = [
    "ChatService",
    "ReportService",
]
