"""Diagram API endpoints.

Routes:
- POST /diagrams/render - Render a structured diagram to flowchart markup

Dependencies: reqbot.core.diagram
System role: Deterministic diagram rendering HTTP API
"""

from fastapi import APIRouter, HTTPException

from reqbot.core.diagram import Diagram, RenderedMarkup, render
from reqbot.core.exceptions import DiagramError

router = APIRouter(prefix="/diagrams", tags=["diagrams"])


@router.post("/render", response_model=RenderedMarkup)
async def render_diagram(diagram: Diagram) -> RenderedMarkup:
    """Render nodes and edges to markup, dropping dangling edges with warnings.

    Raises:
        HTTPException(422): Empty diagram or broken start/end shape
    """
    try:
        return render(diagram)
    except DiagramError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": e.message, "details": e.details},
        )
