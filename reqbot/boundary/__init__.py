"""
Boundary layer for external system integrations.

Handles storage that outlives a single request, starting with the
chat-to-report hand-off store.
"""
