"""Report API endpoints.

Routes:
- POST /reports/{handoff_id} - Generate every report section concurrently
- POST /reports/{handoff_id}/sections/{section} - Regenerate one section

Dependencies: reqbot.application.services.report_service, reqbot.boundary.handoff
System role: Report generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from reqbot.api.deps import get_handoff_store, get_report_service
from reqbot.application.services.report_service import ReportService
from reqbot.boundary.handoff import Handoff, HandoffStore, load_handoff
from reqbot.core.exceptions import StorageError
from reqbot.models.report import ReportResponse, ReportSection, SectionResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


def _load(store: HandoffStore, handoff_id: str) -> Handoff:
    try:
        return load_handoff(store, handoff_id)
    except StorageError as e:
        logger.warning(f"{__name__}:_load - {e}")
        raise HTTPException(
            status_code=404,
            detail=f"No requirements found for hand-off {handoff_id}",
        )


@router.post(
    "/{handoff_id}",
    response_model=ReportResponse,
    response_model_exclude_none=True,
)
async def generate_report(
    handoff_id: str,
    report_service: ReportService = Depends(get_report_service),
    handoff_store: HandoffStore = Depends(get_handoff_store),
) -> ReportResponse:
    """Generate the full report for a stored hand-off.

    Sections fail independently; a failed section carries an error and
    can be regenerated through the section route.

    Raises:
        HTTPException(404): Hand-off not found
    """
    handoff = _load(handoff_store, handoff_id)
    report = await report_service.generate_report(handoff.requirements, handoff.transcript)
    return ReportResponse(handoff_id=handoff_id, report=report)


@router.post(
    "/{handoff_id}/sections/{section}",
    response_model=SectionResult,
    response_model_exclude_none=True,
)
async def regenerate_section(
    handoff_id: str,
    section: ReportSection,
    report_service: ReportService = Depends(get_report_service),
    handoff_store: HandoffStore = Depends(get_handoff_store),
) -> SectionResult:
    """Regenerate a single report section.

    Raises:
        HTTPException(404): Hand-off not found
    """
    handoff = _load(handoff_store, handoff_id)
    return await report_service.generate_section(
        section, handoff.requirements, handoff.transcript
    )
