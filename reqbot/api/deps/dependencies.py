"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: reqbot.configs, reqbot.core, reqbot.application, reqbot.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from reqbot.application.services import ChatService, ReportService
from reqbot.boundary.handoff import HandoffStore, InMemoryHandoffStore
from reqbot.configs import Settings, get_settings
from reqbot.core.flows import ReqBotFlows, build_flow_catalog
from reqbot.core.generation import StructuredGenerator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._generator = None
        self._flows = None
        self._handoff_store = None

    @property
    def generator(self) -> StructuredGenerator:
        """Get cached structured generator."""
        if self._generator is None:
            settings = get_settings()
            catalog = build_flow_catalog(settings.llm)
            if settings.llm.use_prompt_registry:
                labels = [settings.llm.prompt_label] if settings.llm.prompt_label else None
                catalog.register_all(settings.llm, labels=labels)
            self._generator = StructuredGenerator(catalog, settings.llm)
        return self._generator

    @property
    def flows(self) -> ReqBotFlows:
        """Get cached flows facade."""
        if self._flows is None:
            self._flows = ReqBotFlows(self.generator)
        return self._flows

    @property
    def handoff_store(self) -> HandoffStore:
        """Get cached hand-off store."""
        if self._handoff_store is None:
            settings = get_settings()
            self._handoff_store = InMemoryHandoffStore(max_bytes=settings.handoff.max_bytes)
        return self._handoff_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._generator = None
        self._flows = None
        self._handoff_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_handoff_store(
    cache: ServiceCache = Depends(get_service_cache),
) -> HandoffStore:
    """Get the shared hand-off store."""
    return cache.handoff_store


def get_chat_service(
    cache: ServiceCache = Depends(get_service_cache),
    handoff_store: HandoffStore = Depends(get_handoff_store),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        cache: Service cache (injected via Depends)
        handoff_store: Hand-off store (injected via Depends)

    Returns:
        ChatService: Chat service over the cached flows
    """
    return ChatService(flows=cache.flows, handoff_store=handoff_store)


def get_report_service(
    cache: ServiceCache = Depends(get_service_cache),
) -> ReportService:
    """Get report service instance."""
    return ReportService(flows=cache.flows)
