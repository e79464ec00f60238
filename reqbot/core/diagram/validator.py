"""
Diagram structure validator.

Checks a candidate Diagram before rendering:
- Fatal: empty node set, wrong start/end counts, duplicate node ids
- Tolerated: edges pointing at unknown ids are dropped with a warning
- Advisory: unreachable nodes, dead ends, under-branched decisions

Dependencies: reqbot.core.diagram.diagram_schema, reqbot.core.exceptions
System role: Guards the renderer against imperfect oracle output
"""

import logging
from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field

from reqbot.core.diagram.diagram_schema import (
    DanglingEdgeWarning,
    DeadEndWarning,
    DecisionBranchWarning,
    Diagram,
    DiagramEdge,
    DiagramWarning,
    NodeKind,
    UnreachableNodeWarning,
)
from reqbot.core.exceptions import EmptyDiagramError, MalformedDiagramError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedDiagram:
    """Diagram that passed the fatal checks, with dangling edges removed."""

    diagram: Diagram
    edges: tuple[DiagramEdge, ...]
    warnings: list[DiagramWarning] = field(default_factory=list)


def validate_diagram(diagram: Diagram) -> ValidatedDiagram:
    """
    Validate a diagram's shape and referential integrity.

    Args:
        diagram: Candidate diagram from the generation oracle

    Returns:
        ValidatedDiagram: Surviving edges in original order plus warnings

    Raises:
        EmptyDiagramError: If the diagram has no nodes
        MalformedDiagramError: If there is not exactly one start node, no end
            node, or a node id appears more than once
    """
    if not diagram.nodes:
        raise EmptyDiagramError()

    _check_shape(diagram)

    warnings: list[DiagramWarning] = []
    edges = _drop_dangling_edges(diagram, warnings)
    warnings.extend(_check_flow(diagram, edges))

    for warning in warnings:
        logger.warning(f"{__name__}:validate_diagram - {warning.code}: {warning.message}")

    return ValidatedDiagram(diagram=diagram, edges=edges, warnings=warnings)


def _check_shape(diagram: Diagram) -> None:
    id_counts = Counter(node.id for node in diagram.nodes)
    duplicates = sorted(node_id for node_id, count in id_counts.items() if count > 1)
    if duplicates:
        raise MalformedDiagramError(
            f"Duplicate node ids: {', '.join(duplicates)}",
            node_ids=duplicates,
        )

    starts = [node.id for node in diagram.nodes if node.kind is NodeKind.START]
    if len(starts) != 1:
        raise MalformedDiagramError(
            f"Diagram must have exactly one start node, found {len(starts)}",
            node_ids=starts,
        )

    if not any(node.kind is NodeKind.END for node in diagram.nodes):
        raise MalformedDiagramError("Diagram must have at least one end node")


def _drop_dangling_edges(
    diagram: Diagram,
    warnings: list[DiagramWarning],
) -> tuple[DiagramEdge, ...]:
    known_ids = {node.id for node in diagram.nodes}
    surviving: list[DiagramEdge] = []

    for index, edge in enumerate(diagram.edges):
        missing = [
            node_id for node_id in (edge.source, edge.target) if node_id not in known_ids
        ]
        if missing:
            warnings.append(
                DanglingEdgeWarning(
                    message=(
                        f"Dropped edge {index} {edge.source} -> {edge.target}: "
                        f"unknown node id {', '.join(missing)}"
                    ),
                    edge_index=index,
                    source=edge.source,
                    target=edge.target,
                )
            )
            continue
        surviving.append(edge)

    return tuple(surviving)


def _check_flow(diagram: Diagram, edges: tuple[DiagramEdge, ...]) -> list[DiagramWarning]:
    forward: dict[str, list[str]] = defaultdict(list)
    backward: dict[str, list[str]] = defaultdict(list)
    for edge in edges:
        forward[edge.source].append(edge.target)
        backward[edge.target].append(edge.source)

    start_id = next(node.id for node in diagram.nodes if node.kind is NodeKind.START)
    end_ids = [node.id for node in diagram.nodes if node.kind is NodeKind.END]

    reachable = _walk([start_id], forward)
    leads_to_end = _walk(end_ids, backward)

    warnings: list[DiagramWarning] = []
    for node in diagram.nodes:
        if node.id not in reachable:
            warnings.append(
                UnreachableNodeWarning(
                    message=f"Node {node.id} is not reachable from start node {start_id}",
                    node_id=node.id,
                )
            )
        elif node.id not in leads_to_end:
            warnings.append(
                DeadEndWarning(
                    message=f"Node {node.id} never reaches an end node",
                    node_id=node.id,
                )
            )

        if node.kind is NodeKind.DECISION and len(forward[node.id]) < 2:
            warnings.append(
                DecisionBranchWarning(
                    message=(
                        f"Decision node {node.id} has {len(forward[node.id])} "
                        "outgoing edge(s), expected at least 2"
                    ),
                    node_id=node.id,
                    outgoing=len(forward[node.id]),
                )
            )

    return warnings


def _walk(roots: list[str], adjacency: dict[str, list[str]]) -> set[str]:
    seen = set(roots)
    queue = deque(roots)
    while queue:
        current = queue.popleft()
        for neighbour in adjacency.get(current, ()):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen
