"""Activity diagram IR, validator and renderer.

Exports schema definitions and the render entry point.
"""

from reqbot.core.diagram.diagram_schema import (
    AnyDiagramWarning,
    DanglingEdgeWarning,
    DeadEndWarning,
    DecisionBranchWarning,
    Diagram,
    DiagramEdge,
    DiagramNode,
    DiagramWarning,
    NodeKind,
    RenderedMarkup,
    UnreachableNodeWarning,
)
from reqbot.core.diagram.renderer import render
from reqbot.core.diagram.sanitizer import sanitize_label
from reqbot.core.diagram.validator import ValidatedDiagram, validate_diagram

__all__ = [
    "AnyDiagramWarning",
    "DanglingEdgeWarning",
    "DeadEndWarning",
    "DecisionBranchWarning",
    "Diagram",
    "DiagramEdge",
    "DiagramNode",
    "DiagramWarning",
    "NodeKind",
    "RenderedMarkup",
    "UnreachableNodeWarning",
    "ValidatedDiagram",
    "render",
    "sanitize_label",
    "validate_diagram",
]
