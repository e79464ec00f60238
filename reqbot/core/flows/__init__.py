"""ReqBot flows: schemas, prompts, transcript formatting and the flow facade."""

from reqbot.core.flows.flow_prompts import FLOW_PROMPTS, build_flow_catalog
from reqbot.core.flows.flow_schema import (
    ChatSender,
    ChatTurn,
    Priority,
    Requirement,
    RequirementType,
)
from reqbot.core.flows.flows import ReqBotFlows
from reqbot.core.flows.transcript import format_transcript

__all__ = [
    "FLOW_PROMPTS",
    "ChatSender",
    "ChatTurn",
    "Priority",
    "ReqBotFlows",
    "Requirement",
    "RequirementType",
    "build_flow_catalog",
    "format_transcript",
]
