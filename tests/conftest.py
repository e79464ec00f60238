"""
Shared test fixtures and configuration for entire test suite.

Provides: sample requirements and conversations, diagram builders, flow mocks
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from reqbot.core.diagram import Diagram, RenderedMarkup
from reqbot.core.flows.flow_schema import ChatTurn, Requirement


@pytest.fixture
def sample_requirements() -> list[Requirement]:
    """Two requirements covering different types and priorities."""
    return [
        Requirement(
            id="FR-1",
            type="Functional",
            description="Users can reset their password by email",
            priority="High",
            confidence_score=0.9,
        ),
        Requirement(
            id="NFR-1",
            type="NonFunctional",
            description="Pages load in under 2 seconds",
            priority="Med",
            confidence_score=0.7,
        ),
    ]


@pytest.fixture
def sample_turns() -> list[ChatTurn]:
    """Short elicitation conversation."""
    return [
        ChatTurn(sender="ai", text="Hello! What are you building?"),
        ChatTurn(sender="user", text="A login system with password reset."),
        ChatTurn(sender="ai", text="How fast should pages load?"),
        ChatTurn(sender="user", text="Under 2 seconds."),
    ]


@pytest.fixture
def sample_transcript() -> str:
    """Transcript matching sample_turns."""
    return (
        "AI: Hello! What are you building?\n"
        "User: A login system with password reset.\n"
        "AI: How fast should pages load?\n"
        "User: Under 2 seconds."
    )


@pytest.fixture
def decision_diagram() -> Diagram:
    """Start, decision, action and end nodes with labelled branches."""
    return Diagram.model_validate(
        {
            "nodes": [
                {"id": "A", "kind": "start", "label": "Start"},
                {"id": "B", "kind": "decision", "label": "Valid input?"},
                {"id": "C", "kind": "action", "label": "Process"},
                {"id": "D", "kind": "end", "label": "End"},
            ],
            "edges": [
                {"from": "A", "to": "B"},
                {"from": "B", "to": "C", "label": "Yes"},
                {"from": "B", "to": "D", "label": "No"},
                {"from": "C", "to": "D"},
            ],
        }
    )


@pytest.fixture
def mock_flows() -> MagicMock:
    """
    Create mock ReqBotFlows with successful async methods.

    Returns:
        MagicMock: Flows whose methods are AsyncMocks
    """
    flows = MagicMock()
    flows.chat_reply = AsyncMock(return_value="Could you tell me more about your users?")
    flows.extract_requirements = AsyncMock(return_value=[])
    flows.executive_summary = AsyncMock(return_value="<p>Summary</p>")
    flows.activity_diagram = AsyncMock(
        return_value=RenderedMarkup(markup='flowchart TD\n    A(["Start"])\n    B(["End"])\n    A --> B')
    )
    flows.cost_estimation = AsyncMock(return_value="<table></table>")
    flows.references = AsyncMock(return_value="<h3>Source</h3>")
    return flows
