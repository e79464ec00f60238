"""
Deterministic flowchart renderer.

Turns a validated Diagram into Mermaid flowchart markup:

    flowchart TD
        A(["Start"])
        B{"Valid input?"}
        C["Process"]
        A --> B
        B -->|"Yes"| C

One line per header, node and surviving edge. Labels are sanitized once
here and always emitted quoted, so the markup structure never depends on
label content.

Dependencies: reqbot.core.diagram.validator, reqbot.core.diagram.sanitizer
System role: Pure Diagram -> markup transformation
"""

import logging

from reqbot.core.diagram.diagram_schema import (
    Diagram,
    DiagramEdge,
    DiagramNode,
    NodeKind,
    RenderedMarkup,
)
from reqbot.core.diagram.sanitizer import sanitize_label
from reqbot.core.diagram.validator import validate_diagram

logger = logging.getLogger(__name__)

HEADER = "flowchart TD"
INDENT = "    "

# (open, close) bracket pair per node kind
SHAPES: dict[NodeKind, tuple[str, str]] = {
    NodeKind.START: ('(["', '"])'),
    NodeKind.END: ('(["', '"])'),
    NodeKind.ACTION: ('["', '"]'),
    NodeKind.DECISION: ('{"', '"}'),
}


def render(diagram: Diagram) -> RenderedMarkup:
    """
    Render a diagram into flowchart markup.

    Args:
        diagram: Structured diagram from the generation oracle

    Returns:
        RenderedMarkup: Markup text and any advisory warnings

    Raises:
        EmptyDiagramError: If the diagram has no nodes
        MalformedDiagramError: If the start/end shape or id uniqueness is violated
    """
    validated = validate_diagram(diagram)

    lines = [HEADER]
    lines.extend(render_node(node) for node in diagram.nodes)
    lines.extend(render_edge(edge) for edge in validated.edges)

    logger.debug(
        f"{__name__}:render - nodes={len(diagram.nodes)}, "
        f"edges={len(validated.edges)}, dropped={len(diagram.edges) - len(validated.edges)}"
    )

    return RenderedMarkup(markup="\n".join(lines), warnings=validated.warnings)


def render_node(node: DiagramNode) -> str:
    """
    Emit the vertex declaration for one node.

    Only quotes and parentheses are stripped. A "#...;" run inside a label is
    read by Mermaid as an entity code, e.g. "#35;" displays as "#".
    """
    opening, closing = SHAPES[node.kind]
    return f"{INDENT}{node.id}{opening}{sanitize_label(node.label)}{closing}"


def render_edge(edge: DiagramEdge) -> str:
    """Emit the connection line for one edge, annotated when it has a label."""
    label = sanitize_label(edge.label) if edge.label else ""
    if label:
        return f'{INDENT}{edge.source} -->|"{label}"| {edge.target}'
    return f"{INDENT}{edge.source} --> {edge.target}"
