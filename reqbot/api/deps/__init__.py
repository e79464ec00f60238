"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_handoff_store,
    get_report_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_handoff_store",
    "get_report_service",
    "get_service_cache",
    "get_settings_dependency",
]
