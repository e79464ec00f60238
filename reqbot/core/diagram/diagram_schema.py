"""
Activity diagram schemas.

This module defines:
- The node/edge intermediate representation the oracle is constrained to emit
- The rendered markup result returned to callers
- Advisory warnings recorded while validating a diagram

Dependencies: pydantic
System role: Data schemas for the diagram validator and renderer
"""

import re
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

NODE_ID_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*$"

# Flowchart keywords that cannot serve as vertex keys
RESERVED_IDS = frozenset({
    "end",
    "style",
    "class",
    "classDef",
    "click",
    "linkStyle",
    "subgraph",
    "graph",
    "flowchart",
    "direction",
    "call",
    "href",
    "default",
})

_WHITESPACE_RUN = re.compile(r"\s+")


def _collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value).strip()


class NodeKind(str, Enum):
    """Shape discriminant for a diagram node."""

    START = "start"
    END = "end"
    ACTION = "action"
    DECISION = "decision"


class DiagramNode(BaseModel):
    """Single activity, decision or terminal step in the flow."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        pattern=NODE_ID_PATTERN,
        description="Short unique token used as the vertex key, e.g. A, B, step1",
    )
    label: str = Field(description="Short human-readable text shown inside the shape")
    kind: NodeKind = Field(description="One of start, end, action, decision")

    @field_validator("id")
    @classmethod
    def _reject_reserved_id(cls, value: str) -> str:
        if value in RESERVED_IDS:
            raise ValueError(f"node id {value!r} is a reserved flowchart keyword")
        return value

    @field_validator("label")
    @classmethod
    def _normalize_label(cls, value: str) -> str:
        return _collapse_whitespace(value)


class DiagramEdge(BaseModel):
    """Directed connection between two nodes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="from", description="Id of the node the edge leaves")
    target: str = Field(alias="to", description="Id of the node the edge enters")
    label: str | None = Field(
        default=None,
        description="Optional annotation, e.g. Yes or No on edges leaving a decision",
    )

    @field_validator("label")
    @classmethod
    def _normalize_label(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _collapse_whitespace(value)


class Diagram(BaseModel):
    """Structured activity diagram produced by the generation oracle.

    Node order is rendering order; it carries no semantics.
    """

    model_config = ConfigDict(frozen=True)

    nodes: tuple[DiagramNode, ...] = Field(
        default=(),
        description="Nodes in rendering order. Exactly one start node, at least one end node",
    )
    edges: tuple[DiagramEdge, ...] = Field(
        default=(),
        description="Directed edges between node ids. Decision nodes need two or more outgoing edges",
    )


class DiagramWarning(BaseModel):
    """Advisory diagnostic recorded while validating a diagram. Never fatal."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class DanglingEdgeWarning(DiagramWarning):
    """Edge referenced an unknown node id and was dropped."""

    code: Literal["dangling_edge"] = "dangling_edge"
    edge_index: int
    source: str
    target: str


class UnreachableNodeWarning(DiagramWarning):
    """Node cannot be reached from the start node."""

    code: Literal["unreachable_node"] = "unreachable_node"
    node_id: str


class DeadEndWarning(DiagramWarning):
    """Node is reachable from start but never leads to an end node."""

    code: Literal["dead_end"] = "dead_end"
    node_id: str


class DecisionBranchWarning(DiagramWarning):
    """Decision node has fewer than two outgoing edges."""

    code: Literal["decision_branching"] = "decision_branching"
    node_id: str
    outgoing: int


AnyDiagramWarning = Annotated[
    Union[DanglingEdgeWarning, UnreachableNodeWarning, DeadEndWarning, DecisionBranchWarning],
    Field(discriminator="code"),
]


class RenderedMarkup(BaseModel):
    """Flowchart markup plus the warnings collected while producing it."""

    markup: str = Field(description="Mermaid flowchart text")
    warnings: list[AnyDiagramWarning] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Whether any advisory issue was recorded."""
        return bool(self.warnings)
